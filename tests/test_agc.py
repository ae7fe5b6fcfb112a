import pytest

from fsdrkit.agc import Agc, AgcBuilder, MessageResult


def test_builder_defaults():
    agc = AgcBuilder().build()
    assert agc.max_gain == 65536.0
    assert agc.adjustment_rate == 0.0001
    assert agc.gain == 1.0
    assert agc.reference_power == 1.0
    assert agc.squelch == 0.0
    assert agc.gain_lock is False
    assert agc.auto_lock is False


@pytest.mark.parametrize("squelch, max_gain", [(-1.0, 1.0), (0.0, -1.0)])
def test_negative_parameters_rejected(squelch, max_gain):
    with pytest.raises(ValueError):
        Agc(squelch, max_gain, 1.0, 0.1, 1.0, False, False)


def test_messages_update_parameters():
    agc = AgcBuilder().build()
    assert agc.handle_message("gain_lock", True) is MessageResult.OK
    assert agc.gain_lock is True
    assert agc.handle_message("reference_power", 0.2) is MessageResult.OK
    assert agc.reference_power == 0.2
    assert agc.handle_message("max_gain", True) is MessageResult.INVALID_VALUE
    assert agc.handle_message("auto_lock", 1.0) is MessageResult.INVALID_VALUE
    assert agc.auto_lock is False


def test_unknown_port():
    with pytest.raises(KeyError):
        AgcBuilder().build().handle_message("gain_locked", True)


def test_gain_lock_keeps_gain():
    agc = AgcBuilder().gain_lock(True).adjustment_rate(0.1).build()
    out = agc.process([0.3, 0.7, -0.2])
    assert out == [0.3, 0.7, -0.2]
    assert agc.gain == 1.0


def test_gain_moves_power_toward_reference():
    agc = AgcBuilder().adjustment_rate(0.1).build()
    out = agc.process([0.1] * 500)
    assert abs(out[-1] ** 2 - 1.0) < abs(out[0] ** 2 - 1.0)
    assert agc.gain > 1.0


def test_auto_lock_freezes_gain():
    agc = AgcBuilder().adjustment_rate(1.0).auto_lock(True).build()
    out = agc.process([2.0] * 5)
    assert out[0] == 2.0
    assert agc.gain_lock is True
    assert all(value == out[1] for value in out[1:])
    assert out[1] ** 2 < agc.reference_power