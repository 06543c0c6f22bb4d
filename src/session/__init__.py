from src.session.idle_timer import IdleTimer
from src.session.scheduler import Scheduler
from src.session.session_timeout import SessionTimeout

__all__ = ["IdleTimer", "Scheduler", "SessionTimeout"]
