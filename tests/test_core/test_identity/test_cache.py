########################### Standard Pytest Imports ############################
import pytest
from pytest_mock import MockerFixture
################################################################################
from core.identity.cache import AttemptCache


def test_new_cache_is_empty():
	assert len(AttemptCache()) == 0


def test_clear(mocker: MockerFixture):
	cache = AttemptCache()
	cache.field_groups["Phone"] = mocker.Mock()
	cache.field_definitions["title"] = mocker.Mock()
	cache.organizations["Acme"] = mocker.Mock()
	cache.groups["Eng"] = mocker.Mock()
	assert len(cache) == 4

	cache.clear()
	assert len(cache) == 0
	assert not cache.groups


def test_caches_are_not_shared():
	first, second = AttemptCache(), AttemptCache()
	first.groups["Eng"] = object()
	assert "Eng" not in second.groups
