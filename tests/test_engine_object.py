from spriteworks.engine_object import EngineObject


def test_defaults():
    obj = EngineObject("thing")
    assert obj.name == "thing"
    assert obj.is_active() is True
    assert obj.is_destroy() is False
    assert obj.is_debug() is False


def test_immediate_destroy():
    obj = EngineObject()
    obj.destroy()
    assert obj.is_destroy()
    assert not obj.is_active()


def test_delayed_destroy():
    obj = EngineObject()
    obj.destroy(1.0)
    assert not obj.is_destroy()
    obj.release_time_check(0.5)
    assert not obj.is_destroy()
    obj.release_time_check(0.5)
    assert obj.is_destroy()


def test_release_time_check_without_destroy():
    obj = EngineObject()
    obj.release_time_check(100.0)
    assert not obj.is_destroy()


def test_active_switch():
    obj = EngineObject()
    obj.set_active(False)
    assert not obj.is_active()
    obj.set_active_switch()
    assert obj.is_active()


def test_debug_toggles():
    obj = EngineObject()
    obj.debug_on()
    assert obj.is_debug()
    obj.debug_switch()
    assert not obj.is_debug()
    obj.debug_switch()
    obj.debug_off()
    assert not obj.is_debug()