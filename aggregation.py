import numpy as np
from constants import averaged_measures, SIGNIFICANCE_LEVEL
from measures import new_quality_measures

def average_quality_measures(measures, significance_level = SIGNIFICANCE_LEVEL):
    # GR and FISHER hold proportions, ACC and AUC are left untouched
    result = new_quality_measures()
    num_rules = len(measures)
    for name in averaged_measures:
        result[name] = measures[name].sum() / num_rules if num_rules else np.nan
    if num_rules:
        result['GR'] = (measures['GR'] > 1).sum() / num_rules
        result['FISHER'] = (measures['FISHER'] < significance_level).sum() / num_rules
    else:
        result['GR'] = np.nan
        result['FISHER'] = np.nan
    result['NRULES'] = float(num_rules)
    result['RULE_NUMBER'] = np.nan
    return result

def update_measures(one, another):
    # element-wise sum, used to accumulate the folds of a cross validation
    return one + another
