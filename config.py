import argparse
import logging
import numbers
from constants import default_parameters
from selection import check_measure

def float_range(mini, maxi):
    # Define the function with default arguments
    def float_range_checker(arg):
        try:
            f = float(arg)
        except (TypeError, ValueError):
            raise argparse.ArgumentTypeError('Must be a Floating Point Number')
        if f <= mini or f > maxi:
            raise argparse.ArgumentTypeError('Must be > ' + str(mini) + ' and <= ' + str(maxi))
        return f
    return float_range_checker

def positive_int(arg):
    if isinstance(arg, bool) or not isinstance(arg, (str, numbers.Integral)):
        raise argparse.ArgumentTypeError('Must be an Integer Number')
    try:
        i = int(arg)
    except ValueError:
        raise argparse.ArgumentTypeError('Must be an Integer Number')
    if i <= 0:
        raise argparse.ArgumentTypeError('Must be > 0')
    return i

def default_args(**overrides):
    unknown = set(overrides) - set(default_parameters)
    if unknown:
        raise ValueError(f'Unknown Parameters: {sorted(unknown)}')
    parameters = dict(default_parameters)
    parameters.update(overrides)
    args = argparse.Namespace(**parameters)
    check_measure(args.measure)
    args.top_n = positive_int(args.top_n)
    args.cores = positive_int(args.cores)
    args.significance_level = float_range(0.0, 1.0)(args.significance_level)
    return args

def get_logger(args):
    logging.basicConfig(format = '%(name)s - %(levelname)s - %(message)s')
    logger = logging.getLogger('EPQM')
    if args.verbose:
        logger.setLevel(logging.INFO)
    return logger
