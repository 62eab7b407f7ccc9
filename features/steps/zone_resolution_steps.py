"""
Step definitions for DNS Facade zone resolution scenarios.
"""

from behave import given, then, when

from dns_facade.exceptions import ZoneNotFoundError
from dns_facade.providers.mock_provider import MockDNSProvider


def _api(context):
    if not hasattr(context, "mock"):
        context.mock = MockDNSProvider(context.provider_config)
        context.api = context.mock.dns_api()
    return context.api


@given("a provider that does not allow duplicate zone names")
def step_unique_names(context):
    context.provider_config["supports_duplicate_zone_names"] = False


@given("a provider that allows duplicate zone names")
def step_duplicate_names(context):
    context.provider_config["supports_duplicate_zone_names"] = True


@given("the provider does not support geo record sets")
def step_no_geo(context):
    context.provider_config["supports_geo"] = False


@given('the provider has a zone "{name}" with no id')
def step_zone_without_id(context, name):
    context.provider_config["zones"].append({"name": name})


@given('the provider has a zone "{name}" with id "{zone_id}"')
def step_zone_with_id(context, name, zone_id):
    context.provider_config["zones"].append({"name": name, "id": zone_id})


@when('I resolve the zone "{name}" {times:d} times')
def step_resolve_repeatedly(context, name, times):
    api = _api(context)
    context.results = [api.id_or_name(name) for _ in range(times)]


@when('I resolve the zone "{name}"')
def step_resolve(context, name):
    api = _api(context)
    try:
        context.results = [api.id_or_name(name)]
    except ZoneNotFoundError as e:
        context.error = e


@when('I ask for geo record sets in zone "{zone_id}" {times:d} times')
def step_geo(context, zone_id, times):
    api = _api(context)
    context.results = [api.geo_record_sets_in_zone(zone_id) for _ in range(times)]


@when('I ask for weighted record sets in zones "{first}" and "{second}"')
def step_weighted(context, first, second):
    api = _api(context)
    context.results = [
        api.weighted_record_sets_in_zone(first),
        api.weighted_record_sets_in_zone(second),
    ]


@then('the resolved identifier is "{expected}"')
def step_resolved(context, expected):
    assert context.error is None, context.error
    assert context.results == [expected], context.results


@then('every resolved identifier is "{expected}"')
def step_all_resolved(context, expected):
    assert context.results, "nothing was resolved"
    assert all(result == expected for result in context.results), context.results


@then("the zones were listed {times:d} times")
def step_listings(context, times):
    assert context.mock.zones().listings == times, context.mock.zones().listings


@then('resolution fails for "{name}" after examining {count:d} zones')
def step_not_found(context, name, count):
    assert isinstance(context.error, ZoneNotFoundError), context.error
    assert context.error.zone_name == name
    assert len(context.error.zones) == count


@then("no geo API is returned")
def step_no_geo_api(context):
    assert context.results and all(result is None for result in context.results)


@then('the weighted APIs are bound to "{first}" and "{second}"')
def step_weighted_bound(context, first, second):
    first_api, second_api = context.results
    assert first_api.zone_id == first
    assert second_api.zone_id == second
    assert first_api is not second_api
