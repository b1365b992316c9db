"""
policies/policies.py

Business rules for the storehours project.

Encapsulates:
- What an unconfigured (empty) schedule means (default: always open)
- Which entry wins when several resolve to the same weekday (first one)
"""


class Policies:
    """
    Policy container.

    Parameters (all optional):
      open_when_unconfigured: report open when no schedule is set (default True)
    """

    def __init__(self, open_when_unconfigured=True):
        self.open_when_unconfigured = bool(open_when_unconfigured)

    # ----- Unconfigured schedule -----
    def status_without_schedule(self):
        """Outcome for an empty or missing schedule."""
        return self.open_when_unconfigured

    # ----- Duplicate weekdays -----
    def pick_entry(self, candidates):
        """
        Choose the governing entry among those matching today's weekday.
        Candidates arrive in schedule order; the first one wins.
        Returns None when there are no candidates.
        """
        return next(iter(candidates), None)
