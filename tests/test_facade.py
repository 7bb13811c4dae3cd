from designpatterns.facade import new_a_module_api, new_api, new_b_module_api


def test_facade_api():
    assert new_api().test() == "A module running\nB module running"


def test_a_module():
    assert new_a_module_api().test_a() == "A module running"


def test_b_module():
    assert new_b_module_api().test_b() == "B module running"