import pytest

from ossim.paging import PagingResult, fifo_page_replacement, format_paging_table

CLASSIC = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2, 1, 2, 0, 1, 7, 0, 1]


@pytest.mark.parametrize(
    "references, faults",
    [
        (CLASSIC, 15),
        ([4, 1, 2, 4, 5], 4),
        ([4, 7, 6, 1, 7, 6, 1, 2, 7, 2], 6),
    ],
)
def test_fault_counts_from_reference_strings(references, faults):
    assert fifo_page_replacement(references, 3).faults == faults


def test_every_step_holds_current_page():
    result = fifo_page_replacement(CLASSIC, 3)
    assert len(result.steps) == len(CLASSIC)
    assert all(page in step for page, step in zip(CLASSIC, result.steps))


def test_frames_never_exceeded():
    result = fifo_page_replacement(CLASSIC, 4)
    assert all(len(step) == 4 for step in result.steps)
    assert all(
        len([slot for slot in step if slot is not None]) <= 4 for step in result.steps
    )


def test_hits_and_faults_add_up():
    result = fifo_page_replacement(CLASSIC, 3)
    assert result.hits + result.faults == len(CLASSIC)


def test_repeated_page_faults_once():
    result = fifo_page_replacement([5, 5, 5], 2)
    assert result.faults == 1
    assert result.steps[-1] == (5, None)


def test_zero_frames_rejected():
    with pytest.raises(ValueError):
        fifo_page_replacement([1, 2], 0)


def test_format_table():
    result = fifo_page_replacement([4, 1, 2, 4, 5], 3)
    text = format_paging_table(result)
    assert "frame-1\tframe-2\tframe-3" in text
    assert " 4\t\t\t\t4\t-\t-\n\n" in text
    assert text.endswith("total no.of pagefaults is : 4")


def test_result_is_frozen():
    result = fifo_page_replacement([1], 1)
    assert isinstance(result, PagingResult)
    assert result.faults == 1
    assert result.hits == 0
    assert list(result.steps) == [(1,)]
    with pytest.raises(AttributeError):
        result.faults = 3
    assert result.faults == 1