"""Interface for activity loggers.

An activity logger records what the application did (e.g. "User ... saved").
It is the separate responsibility split out of the user entity in the single
responsibility illustration.
"""

import abc

# pylint: disable=too-few-public-methods


class ActivityLogger(abc.ABC):
    """Contract for recording an activity message."""

    @abc.abstractmethod
    def log(self, message: str) -> None:
        """Record a message describing an activity.

        Args:
            message: Human readable description of the activity.
        """
