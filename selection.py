import logging
import numpy as np
import pandas as pd
from functools import cmp_to_key
from constants import ranking_measures, inverted_measures

def check_measure(by):
    if by not in ranking_measures:
        raise ValueError(f'Invalid Quality Measure: {by}. Choices: {ranking_measures}')

def compare_rules(a, b, by):
    # ascending by `by` (descending for inverted measures), ties: more variables first
    sign = -1 if by in inverted_measures else 1
    if a[by] < b[by]:
        return -1 * sign
    elif a[by] > b[by]:
        return 1 * sign
    elif a['NVAR'] < b['NVAR']:
        return 1
    elif a['NVAR'] > b['NVAR']:
        return -1
    return 0

def rank_rules(measures, by):
    check_measure(by)
    records = measures.to_dict('records')
    positions = sorted(range(len(records)), key = cmp_to_key(lambda i, j: compare_rules(records[i], records[j], by)))
    return measures.iloc[positions]

def get_best_rules(measures, by, n):
    # best first, ignoring the class of the rules
    check_measure(by)
    if n < 0 or n > len(measures):
        raise ValueError(f'Cannot Select {n} Rules From {len(measures)} Rules')
    ranked = rank_rules(measures, by)
    return ranked.tail(n).iloc[::-1]

def get_best_rules_by_class(measures, by, n, classes, class_values = None):
    # classes with less than n rules return all of them
    logger = logging.getLogger('EPQM')
    check_measure(by)
    classes = np.asarray(list(classes))
    if len(classes) != len(measures):
        raise ValueError(f'{len(classes)} Classes For {len(measures)} Rules')
    if n < 0:
        raise ValueError(f'Cannot Select {n} Rules')
    if class_values is None:
        class_values = sorted(set(classes.tolist()))

    best_rules = [measures.iloc[0:0]]
    for class_id in class_values:
        class_measures = measures[classes == class_id]
        th = min(n, len(class_measures))
        logger.info(f'[Class {class_id}] Selecting {th} of {len(class_measures)} Rules')
        best_rules.append(get_best_rules(class_measures, by, th))
    return pd.concat(best_rules, axis = 0)
