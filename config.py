from argparse import ArgumentParser


def add_data_args(parser):
    group = parser.add_argument_group('data')
    group.add_argument(
        '--data_path', type=str, default=''
        )
    group.add_argument(
        '--data_column', type=str, default='value'
        )


def add_logging_args(parser):
    group = parser.add_argument_group('logging')
    group.add_argument(
        '--logger', type=str, default='console',
        choices=['console', 'tensorboard']
        )
    group.add_argument(
        '--logdir', type=str, default='outdir/logs'
        )


def get_args(argv=None):
    parser = ArgumentParser()
    add_data_args(parser)
    add_logging_args(parser)
    return parser.parse_args(argv)
