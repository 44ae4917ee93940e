from cardtable.session.stats import SessionStats

__all__ = ["SessionStats"]
