from markdown_toc.models import TocScanState
from markdown_toc.parser import FenceTracker, find_config_block_end
from markdown_toc.placer import _next_state


def test_fence_tracker_reports_delimiters_as_inside():
    tracker = FenceTracker()

    assert [tracker(line) for line in ["text", "```", "# code", "```", "after"]] == [
        False,
        True,
        True,
        True,
        False,
    ]
    assert tracker.in_fence is False


def test_fence_tracker_accepts_tildes_and_leading_whitespace():
    tracker = FenceTracker()

    assert tracker.is_inside_fence("   ~~~python") is True
    assert tracker.is_inside_fence("# inside") is True
    assert tracker.is_inside_fence("\t~~~") is True
    assert tracker.is_inside_fence("# outside") is False


def test_fence_tracker_does_not_match_fence_styles():
    tracker = FenceTracker()

    tracker("```")
    # A tilde fence closes a backtick fence.
    assert tracker("~~~") is True
    assert tracker("# heading") is False


def test_fence_tracker_ignores_short_or_inline_backticks():
    tracker = FenceTracker()

    assert tracker("``not a fence``") is False
    assert tracker("text ```inline```") is False
    assert tracker.in_fence is False


def test_fresh_tracker_starts_outside():
    first = FenceTracker()
    first("```")

    assert FenceTracker()("# heading") is False


def test_config_block_state_leading_comments_then_config():
    lines = [
        "<!-- markdownlint-disable -->",
        "  <!-- another note -->",
        "<!-- toc:insertAfterHeading=Intro -->",
        "<!-- toc:insertAfterHeadingOffset=2 -->",
        "",
        "<!-- toc:insertAfterHeading=Ignored -->",
    ]

    assert find_config_block_end(lines) == 3


def test_config_block_stops_at_comment_after_config():
    lines = [
        "<!-- toc:insertAfterHeading= -->",
        "<!-- unrelated -->",
        "<!-- toc:insertAfterHeadingOffset=0 -->",
    ]

    assert find_config_block_end(lines) == 0


def test_config_block_requires_comment_prefix_before_config():
    assert find_config_block_end(["", "<!-- toc:insertAfterHeading= -->"]) == -1
    assert find_config_block_end(["# Title", "<!-- toc:insertAfterHeading= -->"]) == -1


def test_config_block_absent_when_only_plain_comments():
    assert find_config_block_end(["<!-- note -->", "<!-- other -->"]) == -1
    assert find_config_block_end([]) == -1


def test_config_block_counts_malformed_config_keys():
    lines = ["<!-- toc:insertAfterHeadingOffset=abc -->", "text"]

    assert find_config_block_end(lines) == 0


def test_toc_scan_transitions_from_found_start():
    assert _next_state(TocScanState.FOUND_START, "") is TocScanState.SKIPPING_BLANKS
    assert _next_state(TocScanState.FOUND_START, "1. [A](#a)") is TocScanState.CONSUMING_LIST
    assert _next_state(TocScanState.FOUND_START, "## Next") is TocScanState.DONE
    assert _next_state(TocScanState.FOUND_START, None) is TocScanState.DONE


def test_toc_scan_transitions_while_consuming_list():
    assert _next_state(TocScanState.SKIPPING_BLANKS, "   ") is TocScanState.SKIPPING_BLANKS
    assert (
        _next_state(TocScanState.CONSUMING_LIST, "    1. [B](#b)")
        is TocScanState.CONSUMING_LIST
    )
    assert _next_state(TocScanState.CONSUMING_LIST, "") is TocScanState.TRAILING_BLANK
    assert _next_state(TocScanState.CONSUMING_LIST, "- [C](#c)") is TocScanState.DONE
    assert _next_state(TocScanState.TRAILING_BLANK, "") is TocScanState.DONE
