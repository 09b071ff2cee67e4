import math
from scipy.stats import fisher_exact

def q_confidence(p, n, P, N):
    if (p + n) == 0:
        return 0.0
    return p / (p + n)

def q_true_positive_rate(p, n, P, N):
    if P == 0:
        return 0.0
    return p / P

def q_false_positive_rate(p, n, P, N):
    if N == 0:
        return 0.0
    return n / N

def q_support(p, n, P, N):
    if (P + N) == 0:
        return 0.0
    return p / (P + N)

def q_support_difference(p, n, P, N):
    if (P + N) == 0:
        return 0.0
    return (p / (P + N)) - (n / (P + N))

def q_wracc(p, n, P, N):
    # weighted relative accuracy, bounded by [-0.25, 0.25]
    if (p + n) == 0:
        return 0.0
    a = (p + n) / (P + N)
    b = (p / (p + n)) - (P / (P + N))
    return a * b

def q_gain(p, n, P, N):
    if P == 0 or p == 0:
        return 0.0
    # p > 0 here, so coverage and tpr are both non zero
    tpr = q_true_positive_rate(p, n, P, N)
    coverage = (p + n) / (P + N)
    a = math.log(tpr / coverage)
    b = math.log(P / (P + N))
    return (p / P) * (a - b)

def q_growth_rate(p, n, P, N):
    tpr = q_true_positive_rate(p, n, P, N)
    fpr = q_false_positive_rate(p, n, P, N)
    if tpr != 0 and fpr != 0:
        return tpr / fpr
    elif tpr != 0:
        return math.inf
    return 0.0

def q_fisher(p, n, P, N):
    # two-tailed p-value of [[tp, fp], [fn, tn]]
    table = [[p, n], [P - p, N - n]]
    _, p_value = fisher_exact(table, alternative = 'two-sided')
    if math.isnan(p_value):
        return 1.0
    return min(float(p_value), 1.0)
