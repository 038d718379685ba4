from textcompare import CompareOptions, compare, compute_stats, diff_lines, summarize_text


def test_word_totals_for_single_changed_line():
    stats = compute_stats(diff_lines("one two", "one three four"))

    assert stats.changed == 1
    assert stats.added_words == 3
    assert stats.removed_words == 1
    assert stats.changed_words == 3


def test_word_changes_take_max_of_summed_totals():
    result = compare("the cat sat\none two", "the dog sat\none three four")
    stats = result.stats

    assert stats.total == 2
    assert stats.changed == 2
    assert stats.added_words == 4
    assert stats.removed_words == 2
    assert stats.changed_words == 4


def test_line_counts_per_kind():
    stats = compute_stats(diff_lines("a\nb\nc\nd", "a\nx\nc"))

    assert (stats.total, stats.equal, stats.changed, stats.added, stats.removed) == (4, 2, 1, 0, 1)


def test_word_totals_skip_lines_without_word_diff():
    lines = diff_lines("one two", "one three four", options=CompareOptions(word_diff=False))
    stats = compute_stats(lines)

    assert stats.changed == 1
    assert stats.added_words == 0
    assert stats.removed_words == 0


def test_empty_result_stats():
    stats = compute_stats(())

    assert stats.total == 0
    assert stats.changed_words == 0


def test_summarize_text_counts_lines_and_words():
    summary = summarize_text("hello world\nfoo")
    assert (summary.lines, summary.words) == (2, 3)

    blank = summarize_text("")
    assert (blank.lines, blank.words) == (1, 0)

    padded = summarize_text("  a  b \n")
    assert (padded.lines, padded.words) == (2, 2)
