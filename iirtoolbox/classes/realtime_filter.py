import abc


class RealtimeFilter(abc.ABC):
    @abc.abstractmethod
    def process_sample(self, x: float) -> float:
        """Process a single sample and return the output."""
        pass

    @abc.abstractmethod
    def reset_state(self):
        """Reset all filter states to 0."""
        pass
