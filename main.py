from config import get_args
from constants import load_error_msg
from data import load_data
from logger import get_logger
from processors import get_processor


def main(argv=None):
    cfg = get_args(argv)
    logger = get_logger(cfg)
    try:
        processor = get_processor(cfg, logger)
        try:
            data = load_data(cfg)
        except (OSError, ValueError) as e:
            logger.log_error(f'{load_error_msg}{e}')
            return
        processor.process(data)
    finally:
        logger.close()


if __name__ == '__main__':
    main()
