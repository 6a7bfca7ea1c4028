info_prefix = 'INFO: '
error_prefix = 'ERROR: '
null_data_msg = 'Data cannot be null.'
sum_msg = 'Processed sum: '
error_msg = 'Error processing data: '
DEFAULT_DATA = (1, 2, 3, 4, 5)
load_error_msg = 'Error loading data: '
