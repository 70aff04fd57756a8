"""
AvatarAPI - Server Package
==========================

Process lifecycle: single-process serving and the multi-worker supervisor.
"""

from src.server.supervisor import WorkerSupervisor, serve_worker

__all__ = ["WorkerSupervisor", "serve_worker"]
