from typing import Optional, Sequence
from constants import null_data_msg, sum_msg, error_msg
from interfaces import ILogger, IProcessor


class DataProcessor(IProcessor):
    def __init__(self, logger: ILogger) -> None:
        super().__init__()
        if logger is None:
            raise ValueError('logger cannot be None')
        self._logger = logger

    @property
    def logger(self) -> ILogger:
        return self._logger

    def process(self, data: Optional[Sequence[int]]) -> None:
        if data is None:
            self._logger.log_error(null_data_msg)
            return
        try:
            total = 0
            for item in data:
                total += item
            self._logger.log_information(f'{sum_msg}{total}')
        except Exception as e:
            self._logger.log_error(f'{error_msg}{e}')


def get_processor(cfg, logger):
    return DataProcessor(logger=logger)
