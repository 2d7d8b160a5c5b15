import pytest

from ossim.scheduling import (
    Process,
    Schedule,
    fcfs,
    format_timeline,
    priority_nonpreemptive,
    priority_preemptive,
    round_robin,
    sjf_nonpreemptive,
    sjf_preemptive,
)

ALGORITHMS = [
    fcfs,
    sjf_nonpreemptive,
    sjf_preemptive,
    priority_nonpreemptive,
    priority_preemptive,
    lambda ps: round_robin(ps, 2),
]

WORKLOADS = [
    [Process(0, 5, 3), Process(1, 3, 1), Process(2, 1, 2), Process(4, 2, 4)],
    [Process(3, 2, 2), Process(3, 4, 1), Process(10, 1, 0)],
    [Process(0, 1, 1)],
]


def test_process_rejects_negative_arrival():
    with pytest.raises(ValueError):
        Process(-1, 3)


def test_process_rejects_zero_burst():
    with pytest.raises(ValueError):
        Process(0, 0)


def test_round_robin_rejects_zero_quantum():
    with pytest.raises(ValueError):
        round_robin([Process(0, 2)], 0)


@pytest.mark.parametrize("workload", WORKLOADS)
def test_schedule_invariants(workload):
    schedules = [
        fcfs(workload),
        sjf_nonpreemptive(workload),
        sjf_preemptive(workload),
        priority_nonpreemptive(workload),
        priority_preemptive(workload),
        round_robin(workload, 2),
    ]
    for schedule in schedules:
        assert len(schedule.results) == len(workload)
        for index, (proc, result) in enumerate(zip(workload, schedule.results)):
            assert result.process == proc
            assert schedule.timeline.count(index) == proc.burst
            assert schedule.timeline.index(index) >= proc.arrival
            assert result.finish == max(
                t + 1 for t, slot in enumerate(schedule.timeline) if slot == index
            )
            assert result.turnaround == result.finish - proc.arrival
            assert result.waiting == result.turnaround - proc.burst
            assert result.waiting >= 0
        assert len(schedule.timeline) == max(r.finish for r in schedule.results)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_average_difference_is_mean_burst(algorithm):
    workload = WORKLOADS[0]
    schedule = algorithm(workload)
    mean_burst = sum(p.burst for p in workload) / len(workload)
    assert schedule.average_turnaround() - schedule.average_waiting() == pytest.approx(
        mean_burst
    )


def test_fcfs_simultaneous_arrivals_keep_input_order():
    schedule = fcfs([Process(0, 2), Process(0, 1), Process(0, 3)])
    assert schedule.timeline == sorted(schedule.timeline)


def test_fcfs_averages_worked_example():
    schedule = fcfs([Process(0, 3), Process(1, 2)])
    assert schedule.average_turnaround() == pytest.approx(3.5)
    assert schedule.average_waiting() == pytest.approx(1.0)


def test_idle_before_first_arrival():
    schedule = fcfs([Process(2, 1)])
    assert schedule.timeline[:2] == [None, None]


def test_sjf_nonpreemptive_runs_shorter_job_first():
    schedule = sjf_nonpreemptive([Process(0, 4), Process(0, 1)])
    assert schedule.timeline[0] == 1
    assert schedule.results[1].finish == 1


def test_sjf_nonpreemptive_does_not_preempt():
    workload = [Process(0, 5), Process(1, 1)]
    schedule = sjf_nonpreemptive(workload)
    assert schedule.results[0].finish == workload[0].burst


def test_priority_nonpreemptive_prefers_lower_number():
    schedule = priority_nonpreemptive([Process(0, 2, 5), Process(0, 2, 1)])
    assert schedule.timeline[0] == 1


def test_priority_preemptive_preempts_on_arrival():
    workload = [Process(0, 5, 2), Process(1, 2, 1)]
    schedule = priority_preemptive(workload)
    assert schedule.timeline[1] == 1
    assert schedule.results[1].finish == workload[1].arrival + workload[1].burst


def test_sjf_preemptive_preempts_on_shorter_arrival():
    workload = [Process(0, 5), Process(1, 2)]
    schedule = sjf_preemptive(workload)
    assert schedule.timeline[1] == 1
    assert schedule.results[1].finish == workload[1].arrival + workload[1].burst


def test_sjf_preemptive_resumes_waiting_processes_in_fifo_order():
    schedule = sjf_preemptive([Process(0, 5), Process(1, 3), Process(2, 1)])
    assert schedule.results[0].finish < schedule.results[1].finish


def test_round_robin_with_large_quantum_matches_fcfs():
    workload = WORKLOADS[0]
    big = max(p.burst for p in workload)
    rr = round_robin(workload, big)
    first = fcfs(workload)
    assert rr.timeline == first.timeline
    assert [r.finish for r in rr.results] == [r.finish for r in first.results]


def test_round_robin_slices_do_not_exceed_quantum():
    quantum = 2
    schedule = round_robin([Process(0, 5), Process(0, 5)], quantum)
    run = 1
    for prev, cur in zip(schedule.timeline, schedule.timeline[1:]):
        run = run + 1 if cur == prev else 1
        assert run <= quantum


def test_format_timeline():
    assert format_timeline([0, None, 1]) == "A  Idle  B"


def test_empty_schedule_averages_raise():
    with pytest.raises(ValueError):
        Schedule().average_turnaround()