import logging
import pandas as pd
from constants import quality_measures, rules_quality_functions
from rules import covers
from utils import parallelize_func

def new_quality_measures():
    return pd.Series(0.0, index = quality_measures)

def confusion_matrix(rule_to_check, const_parameters):
    transactions = const_parameters[0]
    class_list = const_parameters[1]
    covers_func = const_parameters[2]
    rule = rule_to_check[0]
    classification = rule_to_check[1]

    tp = tn = fp = fn = 0
    for i in range(0, len(transactions)):
        if covers_func(rule, transactions[i]):
            if class_list[i] == classification:
                tp += 1
            else:
                fp += 1
        elif class_list[i] != classification:
            tn += 1
        else:
            fn += 1
    return (tp, tn, fp, fn, len(rule))

def quality_measures_values(entry, rule_number):
    tp, tn, fp, fn, nvars = entry
    p = tp
    n = fp
    P = tp + fn
    N = fp + tn
    measures = new_quality_measures()
    for name, q_function in rules_quality_functions.items():
        measures[name] = q_function(p, n, P, N)
    measures['NVAR'] = float(nvars)
    measures['RULE_NUMBER'] = float(rule_number)
    return measures

def get_confusion_matrices(rules, transactions, classification, args, covers_func = covers):
    rules_iter = list(zip(rules['rule'], rules[args.class_column]))
    class_list = list(classification)
    if len(transactions) != len(class_list):
        raise ValueError(f'{len(transactions)} Instances and {len(class_list)} Class Labels')
    matrices = parallelize_func(confusion_matrix, rules_iter,
                    const_parameters = [transactions, class_list, covers_func],
                    cores = args.cores)
    return matrices

def get_rules_quality_measures(rules, transactions, classification, args, covers_func = covers):
    logger = logging.getLogger('EPQM')
    logger.info(f'Calculating Quality Measures of {len(rules)} Rules')
    matrices = get_confusion_matrices(rules, transactions, classification, args, covers_func)
    data = [quality_measures_values(entry, i) for i, entry in enumerate(matrices)]
    measures = pd.DataFrame([m.tolist() for m in data], columns = quality_measures, index = rules.index, dtype = float)
    return measures
