import pytest

from stopforumspam.utils.registry import IdentityAttribute, ParameterRegistry, parameter_registry


def test_registry_order_and_names():
    assert parameter_registry.names() == ("ip", "email", "username", "emailhash")


def test_submittable_excludes_emailhash():
    submittable = parameter_registry.submittable()
    assert [attribute.local_name for attribute in submittable] == ["ip", "email", "username"]
    assert [attribute.submit_name for attribute in submittable] == ["ip_addr", "email", "username"]
    lookup_only = [attribute for attribute in parameter_registry.all() if not attribute.submittable]
    assert lookup_only == [IdentityAttribute("emailhash")]


def test_duplicate_names_rejected():
    with pytest.raises(ValueError):
        ParameterRegistry([IdentityAttribute("ip", "ip_addr"), IdentityAttribute("ip")])
