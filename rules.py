import logging
import numpy as np
import pandas as pd
from utils import parallelize_func

def covers(rule, transaction):
    return set(rule).issubset(transaction)

def filtered_rules(rules, selected):
    # selected keeps the index labels of the rules it was computed from
    return rules.loc[selected.index]

def rules_normalization(rules, args, class_values):
    if len(rules) == 0:
        return pd.Series(0.0, index = class_values)
    rules_distribution = rules[args.class_column].value_counts()
    biggest = max(rules_distribution)
    factor = [biggest / rules_distribution[c] if c in rules_distribution.index else 0.0 for c in class_values]
    return pd.Series(factor, index = class_values)

def test_rules(transaction, const_parameters):
    rules_list = const_parameters[0]
    rules_classes = const_parameters[1]
    rules_normalization_factor = const_parameters[2]
    covers_func = const_parameters[3]
    coverage_rules = pd.Series(0.0, index = rules_normalization_factor.index)

    for rule, class_id in zip(rules_list, rules_classes):
        if covers_func(rule, transaction):
            coverage_rules[class_id] += 1.0

    return coverage_rules * rules_normalization_factor

def rules_prediction(transactions, rules, args, default_class, class_values, covers_func = covers):
    logger = logging.getLogger('EPQM')
    logger.info(f'{len(rules)} Rules To Be Tested on {len(transactions)} Instances')
    rules_normalization_factor = rules_normalization(rules, args, class_values)
    rules_list = list(rules['rule'])
    rules_classes = list(rules[args.class_column])
    votes = parallelize_func(test_rules, transactions,
                const_parameters = [rules_list, rules_classes, rules_normalization_factor, covers_func],
                cores = args.cores)
    prediction = list()
    for v in votes:
        if v.sum() > 0.0:
            prediction.append(v.idxmax())
        else:
            prediction.append(default_class)
    return np.array(prediction)
