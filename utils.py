import math
import os
import sys
import logging
from multiprocessing import Pool
from functools import partial
from tqdm import tqdm
from termcolor import colored
from constants import quality_measures, results_files

def parallelize_func(func, fixed_parameter, const_parameters = None, cores = 1):
    logger = logging.getLogger('EPQM')
    tqdm_disable = logger.getEffectiveLevel() > logging.INFO
    x = len(fixed_parameter)
    if const_parameters is not None:
        func = partial(func, const_parameters = const_parameters)
    if cores <= 1:
        return [func(f) for f in tqdm(fixed_parameter, total = x, disable = tqdm_disable)]
    with Pool(cores) as pool:
        result = list(tqdm(pool.imap(func, fixed_parameter), total = x, disable = tqdm_disable))
    return result

def dataset_transaction(transaction):
    num_columns = len(transaction)
    t = list()
    for i in range(0, num_columns):
        if transaction[i]:
            t.append(i)
    return t

def to_fim_format(dataset, cores = 1):
    data = dataset.values.tolist()
    result = parallelize_func(dataset_transaction, data, cores = cores)
    return result

def get_X_y(args, dataset):
    if args.class_column not in dataset.columns:
        raise ValueError(f'Class Column {args.class_column} Not Found in Dataset')
    X = dataset.drop(columns = args.class_column)
    y = dataset[args.class_column]
    return X, y

def format_quality_measures(measures, num_folds = 1):
    lines = list()
    for name in quality_measures:
        value = float(measures[name])
        if math.isnan(value):
            lines.append(f'{name} ==> --------')
        else:
            lines.append(f'{name} ==> {value / num_folds:.6f}')
    return lines

def save_quality_measures(location, file_name, measures, num_folds):
    f_name = os.path.join(location, file_name)
    if os.path.exists(f_name):
        os.remove(f_name)
    with open(f_name, 'w') as f:
        for line in format_quality_measures(measures, num_folds):
            f.write(f'{line}\n')

def save_results(location, unfiltered, filtered_all, filtered_by_class, num_folds, exit_on_error = False):
    logger = logging.getLogger('EPQM')
    if num_folds <= 0:
        raise ValueError(f'Number of Folds Must Be Positive: {num_folds}')
    records = {
        'unfiltered': unfiltered,
        'filtered_all': filtered_all,
        'filtered_by_class': filtered_by_class
    }
    try:
        for key, measures in records.items():
            save_quality_measures(location, results_files[key], measures, num_folds)
            logger.info(f'Saved {results_files[key]}')
    except OSError as e:
        if not exit_on_error:
            raise
        msg = colored(e, 'red')
        logger.exception(msg)
        sys.exit(1)
