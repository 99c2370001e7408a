import itertools

import pytest

from dsakit.greedy import Job, average_wait_time, max_meetings, min_platforms, schedule_jobs

START = [1, 3, 0, 5, 8, 5]
END = [2, 4, 6, 7, 9, 9]


def test_max_meetings_example():
    assert max_meetings(START, END) == [1, 2, 4, 5]


def test_max_meetings_chosen_do_not_overlap():
    chosen = max_meetings(START, END)
    intervals = sorted((START[p - 1], END[p - 1]) for p in chosen)
    for (_, prev_end), (next_start, _) in zip(intervals, intervals[1:]):
        assert next_start > prev_end


def test_max_meetings_empty():
    assert max_meetings([], []) == []


def test_max_meetings_length_mismatch():
    with pytest.raises(ValueError):
        max_meetings([1, 2], [3])


def test_min_platforms_example():
    arrivals = [900, 945, 955, 1100, 1500, 1800]
    departures = [920, 1200, 1130, 1150, 1900, 2000]
    assert min_platforms(arrivals, departures) == 3


def test_min_platforms_all_overlapping():
    arrivals = [100] * 5
    departures = [200] * 5
    assert min_platforms(arrivals, departures) == len(arrivals)


def test_min_platforms_does_not_mutate_inputs():
    arrivals = [300, 100, 200]
    departures = [350, 150, 250]
    min_platforms(arrivals, departures)
    assert arrivals == [300, 100, 200]
    assert departures == [350, 150, 250]


def test_min_platforms_length_mismatch():
    with pytest.raises(ValueError):
        min_platforms([1, 2], [3])


def test_average_wait_time_example():
    assert average_wait_time([4, 3, 7, 1, 2]) == 4


def test_average_wait_time_independent_of_order():
    jobs = [4, 3, 7, 1, 2]
    results = {average_wait_time(p) for p in itertools.permutations(jobs)}
    assert results == {average_wait_time(jobs)}


def test_average_wait_time_empty_raises():
    with pytest.raises(ValueError):
        average_wait_time([])


def test_schedule_jobs_example():
    jobs = [Job(1, 4, 20), Job(2, 1, 10), Job(3, 2, 40), Job(4, 2, 30)]
    assert schedule_jobs(jobs) == (3, 90)


def test_schedule_jobs_distinct_deadlines_all_done():
    jobs = [Job(i, i, 10 * i) for i in range(1, 6)]
    assert schedule_jobs(jobs) == (len(jobs), sum(job.profit for job in jobs))


def test_schedule_jobs_same_deadline_takes_most_profitable():
    jobs = [Job(1, 1, 5), Job(2, 1, 50), Job(3, 1, 20)]
    done, profit = schedule_jobs(jobs)
    assert done == len([Job(2, 1, 50)])
    assert profit == max(job.profit for job in jobs)


def test_schedule_jobs_empty():
    assert schedule_jobs([]) == (0, 0)