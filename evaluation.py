import logging
import timeit
import pandas as pd
from termcolor import colored
from aggregation import average_quality_measures, update_measures
from measures import get_rules_quality_measures
from precision import precision_measures
from rules import covers, filtered_rules, rules_prediction
from selection import get_best_rules, get_best_rules_by_class
from utils import get_X_y, save_results, to_fim_format

def add_runtime(runtimes, step, start_time):
    end_time = timeit.default_timer()
    runtime = pd.DataFrame([[step, end_time - start_time]], columns = ['step', 'runtime'])
    return pd.concat([runtimes, runtime], ignore_index = True)

def get_class_values(train, test, rules, args):
    if args.class_values is not None:
        return list(args.class_values)
    classes = pd.concat([train[args.class_column], test[args.class_column], rules[args.class_column]])
    class_distribution = classes.value_counts()
    class_distribution.sort_index(inplace = True)
    return list(class_distribution.index)

def evaluate_fold(train, test, rules, args, fold = 1, covers_func = covers):
    # rule items are positions of the feature columns, class column excluded
    logger = logging.getLogger('EPQM')
    runtimes = pd.DataFrame()
    class_values = get_class_values(train, test, rules, args)
    X_train, y_train = get_X_y(args, train)
    X_test, y_test = get_X_y(args, test)

    logger.info(f'[Fold {fold}] Converting Test Dataset to FIM Format')
    test_fim = to_fim_format(X_test, args.cores)
    classification = list(y_test)

    step = 'quality_measures'
    start_time = timeit.default_timer()
    logger.info(f'[Fold {fold}] Calculating Quality Measures')
    measures = get_rules_quality_measures(rules, test_fim, classification, args, covers_func)
    runtimes = add_runtime(runtimes, step, start_time)

    step = 'best_rules'
    start_time = timeit.default_timer()
    logger.info(f'[Fold {fold}] Selecting Best Rules by {args.measure}')
    best_all = get_best_rules(measures, args.measure, args.top_n)
    best_by_class = get_best_rules_by_class(measures, args.measure, args.top_n, rules[args.class_column], class_values)
    rules_filtered_all = filtered_rules(rules, best_all)
    rules_filtered_by_class = filtered_rules(rules, best_by_class)
    runtimes = add_runtime(runtimes, step, start_time)

    step = 'average_measures'
    start_time = timeit.default_timer()
    results = [
        average_quality_measures(measures, args.significance_level),
        average_quality_measures(best_all, args.significance_level),
        average_quality_measures(best_by_class, args.significance_level)
    ]
    runtimes = add_runtime(runtimes, step, start_time)

    step = 'test_rules'
    start_time = timeit.default_timer()
    if len(y_train):
        default_class = y_train.value_counts().idxmax()
    else:
        default_class = class_values[0]
    predictions = list()
    for r in [rules, rules_filtered_all, rules_filtered_by_class]:
        predictions.append(rules_prediction(test_fim, r, args, default_class, class_values, covers_func))
    runtimes = add_runtime(runtimes, step, start_time)

    step = 'precision_measures'
    start_time = timeit.default_timer()
    logger.info(f'[Fold {fold}] Calculating Precision Measures')
    precision_measures(predictions, classification, list(y_train), results, class_values)
    runtimes = add_runtime(runtimes, step, start_time)

    return results, rules_filtered_all, rules_filtered_by_class, runtimes

def evaluate_folds(folds, args, covers_func = covers):
    logger = logging.getLogger('EPQM')
    totals = None
    num_folds = 0
    for train, test, rules in folds:
        num_folds += 1
        logger.info(f'Executing Fold {num_folds}')
        results, _, _, _ = evaluate_fold(train, test, rules, args, num_folds, covers_func)
        if totals is None:
            totals = results
        else:
            totals = [update_measures(a, b) for a, b in zip(totals, results)]

    if num_folds == 0:
        msg = colored('No Folds To Evaluate', 'red')
        logger.error(msg)
        raise ValueError('No Folds To Evaluate')

    if args.output_dir:
        save_results(args.output_dir, totals[0], totals[1], totals[2], num_folds, args.exit_on_error)
    return totals, num_folds
