from enum import Enum, auto


class ConfigurationFault(Enum):
    """Constraints that can be violated when configuring a filter:
    - Order: the order is not a strictly positive integer.
    - FeedbackLength: the feedback (a) coefficients do not have length
      `order + 1`.
    - FeedforwardLength: the feedforward (b) coefficients do not have length
      `order + 1`.
    - LeadingFeedbackZero: `a[0]` is zero and cannot normalize the difference
      equation.

    """

    Order = auto()
    FeedbackLength = auto()
    FeedforwardLength = auto()
    LeadingFeedbackZero = auto()
