"""
core/sentinel.py - Absent-value sentinel

Marks a property the target did not define at capture time.
"""


class _MISSING:
    """
    Sentinel for a property the target did not define itself at capture.

    Used to distinguish:
    - MISSING: absent or only inherited, restore removes the target's own copy
    - None: the property existed and held None, restore writes None back
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "<MISSING>"

    def __bool__(self):
        return False

    def __reduce__(self):
        return "MISSING"


MISSING = _MISSING()
