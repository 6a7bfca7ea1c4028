import sys
from pathlib import Path
from typing import Union
from torch.utils.tensorboard import SummaryWriter
from constants import info_prefix, error_prefix
from interfaces import ILogger


def escape(message: str, encoding: str) -> str:
    return message.encode(encoding, 'backslashreplace').decode(encoding)


def write_line(prefix: str, message: str) -> None:
    encoding = getattr(sys.stdout, 'encoding', None) or 'utf-8'
    print(escape(f'{prefix}{message}', encoding))


class ConsoleLogger(ILogger):

    def log_information(self, message: str) -> None:
        write_line(info_prefix, message)

    def log_error(self, message: str) -> None:
        write_line(error_prefix, message)


class TensorBoardLogger(SummaryWriter, ILogger):
    def __init__(
            self, log_dir: Union[Path, str], *args, **kwargs
            ):
        super().__init__(str(log_dir), *args, **kwargs)

    def _write(self, tag: str, prefix: str, message: str) -> None:
        # add_text serializes the text as utf-8
        self.add_text(tag, escape(message, 'utf-8'))
        write_line(prefix, message)

    def log_information(self, message: str) -> None:
        self._write('info', info_prefix, message)

    def log_error(self, message: str) -> None:
        self._write('error', error_prefix, message)


def get_logger(cfg):
    if cfg.logger == 'console':
        return ConsoleLogger()
    elif cfg.logger == 'tensorboard':
        return TensorBoardLogger(cfg.logdir)
    raise ValueError(f'unknown logger {cfg.logger}')
