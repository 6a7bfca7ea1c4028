from abc import ABC, abstractmethod


class IProcessor(ABC):

    @abstractmethod
    def process(self, data):
        pass


class ILogger(ABC):

    @abstractmethod
    def log_information(self, message: str) -> None:
        pass

    @abstractmethod
    def log_error(self, message: str) -> None:
        pass

    def close(self) -> None:
        pass
