import logging
import numpy as np
import pandas as pd
from sklearn import metrics
from sklearn.metrics import confusion_matrix

def minority_class(train_classification, class_values = None):
    class_distribution = pd.Series(list(train_classification)).value_counts(sort = False)
    if class_values is None:
        class_values = pd.unique(pd.Series(list(train_classification)))
    class_distribution = class_distribution.reindex(list(class_values), fill_value = 0)
    if len(class_distribution) == 0:
        raise ValueError('No Class Values To Find the Minority Class')
    return class_distribution.idxmin()

def binary_precision(classification, prediction, positive_class):
    y_true = classification == positive_class
    y_pred = prediction == positive_class
    tn, fp, fn, tp = confusion_matrix(y_true, y_pred, labels = [False, True]).ravel()
    acc = metrics.accuracy_score(y_true, y_pred)
    tpr = tp / (tp + fn) if (tp + fn) else np.nan
    fpr = fp / (fp + tn) if (fp + tn) else np.nan
    auc = (1.0 + tpr - fpr) / 2.0
    return acc, auc

def precision_measures(predictions, classification, train_classification, results, class_values = None):
    # the minority class of the training data is the positive class
    logger = logging.getLogger('EPQM')
    classification = np.asarray(list(classification))
    if len(predictions) != len(results):
        raise ValueError(f'{len(predictions)} Predictions For {len(results)} Results')
    if class_values is None:
        class_values = pd.unique(pd.Series(list(train_classification) + classification.tolist()))
    positive_class = minority_class(train_classification, class_values)
    logger.info(f'Minority Class: {positive_class}')

    for i, prediction in enumerate(predictions):
        prediction = np.asarray(list(prediction))
        if len(prediction) != len(classification):
            raise ValueError(f'{len(prediction)} Predictions For {len(classification)} Instances')
        if len(classification) == 0:
            acc, auc = np.nan, np.nan
        elif len(class_values) <= 2:
            acc, auc = binary_precision(classification, prediction, positive_class)
        else:
            acc = metrics.accuracy_score(classification, prediction)
            auc = np.nan
        results[i]['ACC'] = float(acc)
        results[i]['AUC'] = float(auc)
    return results
