from qualification import *

#Quality Measures Schema (Order Used When Writing Results)
quality_measures = ['WRACC', 'NVAR', 'NRULES', 'SUPP', 'GAIN', 'CONF', 'GR', 'TPR', 'FPR', 'SUPDIFF', 'FISHER', 'RULE_NUMBER', 'ACC', 'AUC']

#Dictionary For Rules Qualify Functions
rules_quality_functions = {
    'WRACC': q_wracc,
    'SUPP': q_support,
    'GAIN': q_gain,
    'CONF': q_confidence,
    'GR': q_growth_rate,
    'TPR': q_true_positive_rate,
    'FPR': q_false_positive_rate,
    'SUPDIFF': q_support_difference,
    'FISHER': q_fisher,
}

#Measures Used to Rank Rules
ranking_measures = list(rules_quality_functions) + ['NVAR']

#Measures Averaged by the Aggregator
averaged_measures = ['WRACC', 'GAIN', 'CONF', 'TPR', 'FPR', 'SUPDIFF', 'NVAR']

#Measures Where the Less, the Better
inverted_measures = ['FPR']

SIGNIFICANCE_LEVEL = 0.1

results_files = {
    'unfiltered': 'QM_Unfiltered.txt',
    'filtered_all': 'QM_FilteredALL.txt',
    'filtered_by_class': 'QM_FilteredBYCLASS.txt'
}

default_parameters = {
    'class_column': 'class',
    'measure': 'CONF',
    'top_n': 3,
    'significance_level': SIGNIFICANCE_LEVEL,
    'cores': 1,
    'verbose': False,
    'output_dir': None,
    'exit_on_error': False,
    'class_values': None
}
