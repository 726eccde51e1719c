import numpy as np

import pyfeatq as fq


def test_parse_int_array():
    np.testing.assert_array_equal(fq.parse_int_array("[1, 2,3]"), [1, 2, 3])
    assert fq.parse_int_array("[1,x,3]") is None
    assert fq.parse_int_array("[1.5]") is None
    assert fq.parse_int_array("[]").size == 0


def test_parse_float_array():
    np.testing.assert_allclose(fq.parse_float_array("[1.4,2.12,3.5]"), [1.4, 2.12, 3.5])
    assert fq.parse_float_array("[1.4,,2]") is None


def test_parse_bool_array():
    np.testing.assert_array_equal(
        fq.parse_bool_array("[true, FALSE, True, yes]"), [True, False, True, False]
    )
    assert fq.parse_bool_array("[]").dtype == bool
