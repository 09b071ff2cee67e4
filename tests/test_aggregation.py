import math
import pandas as pd
import pytest
from aggregation import average_quality_measures, update_measures
from measures import quality_measures_values

entries = [(8, 70, 2, 20, 2), (3, 3, 0, 0, 1), (1, 1, 2, 2, 3), (0, 5, 5, 0, 1)]

def measures_frame(entries):
    data = [quality_measures_values(e, i).tolist() for i, e in enumerate(entries)]
    return pd.DataFrame(data, columns = quality_measures_values(entries[0], 0).index)

def test_average_quality_measures():
    measures = measures_frame(entries)
    result = average_quality_measures(measures)
    assert result['NRULES'] == 4.0
    assert math.isnan(result['RULE_NUMBER'])
    assert result['CONF'] == pytest.approx(measures['CONF'].mean())
    assert result['NVAR'] == pytest.approx(7 / 4)
    assert result['GR'] == pytest.approx(2 / 4)
    assert result['FISHER'] == pytest.approx((measures['FISHER'] < 0.1).sum() / 4)
    assert result['ACC'] == 0.0
    assert result['AUC'] == 0.0

def test_average_significance_level():
    measures = measures_frame(entries)
    assert average_quality_measures(measures, 1.0)['FISHER'] == pytest.approx((measures['FISHER'] < 1.0).mean())
    assert average_quality_measures(measures, 1e-12)['FISHER'] == 0.0

def test_average_order_independent():
    measures = measures_frame(entries)
    a = average_quality_measures(measures)
    b = average_quality_measures(measures.iloc[[3, 1, 0, 2]])
    pd.testing.assert_series_equal(a, b)

def test_average_empty():
    measures = measures_frame(entries).iloc[0:0]
    result = average_quality_measures(measures)
    assert result['NRULES'] == 0.0
    assert math.isnan(result['CONF'])

def test_update_measures():
    measures = measures_frame(entries)
    a = average_quality_measures(measures)
    total = update_measures(a, a)
    assert total['NRULES'] == 8.0
    assert total['CONF'] == pytest.approx(2 * a['CONF'])
    assert math.isnan(total['RULE_NUMBER'])
