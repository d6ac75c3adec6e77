# This file is part of Arbitrary.
#
# Copyright the Arbitrary Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import pytest

from arbitrary import InvalidArgument, Verbosity, local_settings, settings
from arbitrary.errors import InvalidState


def test_has_sensible_defaults():
    assert settings.default.verbosity == Verbosity.normal
    assert settings.default.bias_factor == 4
    assert settings.default.max_shrinks == 500


def test_inherits_from_default():
    s = settings(max_shrinks=3)
    assert s.max_shrinks == 3
    assert s.bias_factor == settings.default.bias_factor


def test_inherits_from_parent():
    parent = settings(max_shrinks=3)
    child = settings(parent, bias_factor=None)
    assert (child.max_shrinks, child.bias_factor) == (3, None)


def test_parent_must_be_settings():
    with pytest.raises(InvalidArgument):
        settings(parent=3)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"bias_factor": 1},
        {"bias_factor": True},
        {"bias_factor": "4"},
        {"max_shrinks": -1},
        {"max_shrinks": 1.5},
        {"verbosity": 7},
        {"no_such_setting": 1},
    ],
)
def test_rejects_invalid_settings(kwargs):
    with pytest.raises(InvalidArgument):
        settings(**kwargs)


def test_settings_are_immutable():
    s = settings()
    with pytest.raises(AttributeError):
        s.max_shrinks = 10


def test_cannot_assign_to_settings_class():
    with pytest.raises(AttributeError):
        settings.default = settings()
    with pytest.raises(AttributeError):
        settings.max_shrinks = 10


def test_cannot_define_settings_once_locked():
    with pytest.raises(InvalidState):
        settings._define_setting("late", default=1, description="", validator=int)


def test_can_load_registered_profile():
    settings.register_profile("tiny", max_shrinks=1, bias_factor=None)
    settings.load_profile("tiny")
    assert settings.default.max_shrinks == 1
    assert settings.default.bias_factor is None
    assert settings.get_profile("tiny") is settings.default


def test_unregistered_profile_is_an_error():
    with pytest.raises(InvalidArgument):
        settings.get_profile("nonexistent")
    with pytest.raises(InvalidArgument):
        settings.load_profile("nonexistent")


def test_local_settings_are_restored():
    with local_settings(settings(max_shrinks=2)) as s:
        assert settings.default is s
    assert settings.default.max_shrinks == 500


def test_repr_includes_every_setting():
    r = repr(settings())
    for name in ("bias_factor", "max_shrinks", "verbosity"):
        assert name + "=" in r


def test_verbosity_repr():
    assert repr(Verbosity.debug) == "Verbosity.debug"
