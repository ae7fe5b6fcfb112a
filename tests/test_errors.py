import pytest

from fsdrkit.sigmf.errors import (
    BadSampleRate,
    MissingMandatoryField,
    SigMFError,
    SigMFJsonError,
    UnknownDatasetFormat,
)


def test_missing_mandatory_field_keeps_field():
    err = MissingMandatoryField("global")
    assert err.field == "global"
    assert "Mandatory field is missing" in str(err)
    assert "global" in str(err)


def test_missing_mandatory_field_is_sigmf_error():
    err = MissingMandatoryField("version")
    assert isinstance(err, SigMFError)
    assert err.field == "version"
    assert "version" in str(err)


def test_unknown_dataset_format_keeps_value():
    err = UnknownDatasetFormat("xf99")
    assert err.value == "xf99"
    assert "Unknown DatasetFormat" in str(err)
    assert "xf99" in str(err)


def test_unknown_dataset_format_is_value_error():
    err = UnknownDatasetFormat("bogus")
    assert isinstance(err, ValueError)
    assert isinstance(err, SigMFError)
    assert err.value == "bogus"
    assert "bogus" in str(err)


def test_bad_sample_rate_message():
    err = BadSampleRate()
    assert str(err) == "Sample rate must be positive and less than 1e250"
    with pytest.raises(SigMFError):
        raise err


def test_json_error_keeps_detail():
    err = SigMFJsonError("unexpected end of input")
    assert err.detail == "unexpected end of input"
    assert str(err).startswith("JSON malformed")
    assert "unexpected end of input" in str(err)


def test_json_error_caught_as_value_error():
    err = SigMFJsonError("bad")
    assert isinstance(err, ValueError)
    assert isinstance(err, SigMFError)
    assert err.detail == "bad"
    assert "bad" in str(err)