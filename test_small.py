from memory_manager import FrameTable
from policies import POLICIES
from simulator import PageReplacementSimulator


def test_lru_small():
    simulator = PageReplacementSimulator(algorithm='LRU', wss=2)
    stats = simulator.run_simulation([1, 2, 1, 3, 1, 2])

    # 1, 2 fill; 1 hits; 3 evicts 2; 1 hits; 2 evicts 3
    assert stats.fills == 2
    assert stats.hits == 2
    assert stats.page_faults == 2
    assert simulator.policy.frames.slots == [1, 2]


def test_clock_small():
    simulator = PageReplacementSimulator(algorithm='Clock', wss=2)
    stats = simulator.run_simulation([5, 6, 5, 7])

    assert stats.page_faults == 1
    assert stats.hits == 1
    assert simulator.policy.frames.slots == [7, 6]
    assert simulator.policy.use_bits == [1, 0]
    assert simulator.policy.pointer == 1


def test_fifo_small():
    simulator = PageReplacementSimulator(algorithm='FIFO', wss=3)
    stats = simulator.run_simulation([1, 2, 3, 1, 4])

    # 1 sits under the cursor so it hits; 4 then replaces it
    assert stats.fills == 3
    assert stats.hits == 1
    assert stats.page_faults == 1
    assert simulator.policy.frames.slots == [4, 2, 3]
    assert simulator.policy.pointer == 1


def test_policy_run_matches_simulator():
    trace = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5, 8, 9, 7, 9, 3, 2, 3, 8, 4]
    for wss in range(1, 6):
        for algorithm, policy in POLICIES.items():
            stats = PageReplacementSimulator(algorithm, wss).run_simulation(trace)
            assert policy.run(wss, trace) == stats.page_faults


def test_frame_table_small():
    table = FrameTable(3)
    assert table.find_free_slot() == 0
    assert table.resident_count() == 0

    table.install(0, 8)
    table.install(1, 9)
    assert table.find_free_slot() == 2
    assert not table.is_full()

    table.install(2, 8)
    assert table.is_full()
    assert table.find_page(8) == 2
    assert table.find_page(7) is None

    table.move_to_back(0)
    assert table.slots == [9, 8, 8]
    assert table.shift_in(5) == 9
    assert table.slots == [8, 8, 5]
    assert len(table) == 3


def test_verbose_run_prints_summary(capsys):
    PageReplacementSimulator(algorithm='clock', wss=2).run_simulation([5, 6, 5, 7], verbose=True)
    out = capsys.readouterr().out
    assert "Running Clock algorithm with 2 frames on 4 references" in out
    assert "Page Faults: 1" in out
