"""Tests for worker supervision without starting real processes."""

import pytest

from src.api.config import APIConfig
from src.server.supervisor import WorkerSupervisor


class FakeProcess:
    def __init__(self, alive=True, pid=100, exitcode=None):
        self._alive = alive
        self.pid = pid
        self.exitcode = exitcode
        self.closed = False

    def is_alive(self):
        return self._alive

    def close(self):
        self.closed = True


@pytest.fixture
def supervisor(monkeypatch):
    sup = WorkerSupervisor(APIConfig(workers=2))
    monkeypatch.setattr(sup, "_spawn", lambda: FakeProcess(pid=999))
    return sup


def test_dead_worker_replaced(supervisor):
    dead = FakeProcess(alive=False, pid=101, exitcode=1)
    supervisor._workers = [FakeProcess(pid=100), dead]

    assert supervisor.check_workers() == 1
    assert dead.closed
    assert [p.pid for p in supervisor.workers] == [100, 999]


def test_healthy_workers_left_alone(supervisor):
    supervisor._workers = [FakeProcess(pid=100), FakeProcess(pid=101)]

    assert supervisor.check_workers() == 0
    assert [p.pid for p in supervisor.workers] == [100, 101]


def test_no_replacement_while_shutting_down(supervisor):
    supervisor._workers = [FakeProcess(alive=False, exitcode=0)]
    supervisor._handle_signal(15, None)

    assert supervisor.check_workers() == 0
