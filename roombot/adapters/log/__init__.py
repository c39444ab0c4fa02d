from roombot.adapters.log.logger import NullLogger, StderrLogger, create_logger

__all__ = ["NullLogger", "StderrLogger", "create_logger"]
