from markdown_toc.models import (
    ConfigBlockState,
    InlineConfig,
    TocBlock,
    TocScanState,
    UpdateOutcome,
)


def test_toc_scan_state_members():
    assert list(TocScanState) == [
        TocScanState.SEARCHING_START,
        TocScanState.FOUND_START,
        TocScanState.SKIPPING_BLANKS,
        TocScanState.CONSUMING_LIST,
        TocScanState.TRAILING_BLANK,
        TocScanState.DONE,
    ]


def test_config_block_state_members():
    assert list(ConfigBlockState) == [
        ConfigBlockState.LEADING_COMMENTS,
        ConfigBlockState.CONFIG_LINES,
        ConfigBlockState.DONE,
    ]


def test_update_outcome_members():
    assert {outcome.name for outcome in UpdateOutcome} == {
        "UPDATED",
        "SKIPPED_NO_CONFIG",
        "SKIPPED_NO_HEADINGS",
        "SKIPPED_BUSY",
    }


def test_inline_config_defaults():
    config = InlineConfig()

    assert config.insert_after_heading == ""
    assert config.insert_after_heading_offset == 0
    assert config.matches_heading("") is False


def test_inline_config_matches_heading_case_insensitively():
    config = InlineConfig(insert_after_heading="Introduction")

    assert config.matches_heading("introduction")
    assert config.matches_heading("  INTRODUCTION ")
    assert not config.matches_heading("Intro")


def test_toc_block_missing():
    block = TocBlock.missing()

    assert block == TocBlock(-1, -1)
    assert block.found is False
    assert TocBlock(2, 7).found is True
