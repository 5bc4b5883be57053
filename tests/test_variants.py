import pytest
from inline_snapshot import snapshot

from pipe_autocomplete import AsIs, CallableDescriptor, Resolver, VariantFormatter, camelize


def test_camelize_underscore():
    assert camelize('str_replace') == snapshot('strReplace')


def test_camelize_dash():
    assert camelize('is-array') == snapshot('isArray')


def test_camelize_keeps_inner_case():
    assert camelize('get_HTTP_code') == snapshot('getHTTPCode')


def test_camelize_leading_delimiter():
    assert camelize('_private') == snapshot('private')


def test_camelize_repeated_delimiters():
    assert camelize('a__b-_c') == snapshot('aBC')


def test_camelize_empty():
    assert camelize('') == ''


def test_as_is_resolver():
    resolver = AsIs()
    assert isinstance(resolver, Resolver)
    assert resolver.resolve('str_replace') == 'str_replace'
    assert resolver.resolve('') == ''


@pytest.mark.parametrize(
    'name,expected',
    [
        ('strtoupper', ['strtoupper']),
        ('abs', ['abs']),
        ('strReplace', ['strReplace']),
        ('str_replace', ['str_replace', 'strReplace']),
        ('is-array', ['is-array', 'isArray']),
        ('x_', ['x_', 'x']),
    ],
)
def test_variants(name: str, expected: list[str]):
    assert VariantFormatter().variants(CallableDescriptor(name)) == expected


def test_variants_raw_name_first_and_bounded():
    for name in ['a', 'a_b', '_a_b_', 'A-b_C', '']:
        variants = VariantFormatter().variants(CallableDescriptor(name))
        assert variants[0] == name
        assert 1 <= len(variants) <= 2
        assert len(set(variants)) == len(variants)


def test_variants_are_purely_lexical():
    assert VariantFormatter().variants(CallableDescriptor('abs')) == snapshot(['abs'])
    assert VariantFormatter().variants(CallableDescriptor('ABS')) == snapshot(['ABS', 'aBS'])


def test_names_without_delimiters_have_one_variant():
    for name in ['abs', 'strtoupper', 'isArray', 'x']:
        assert VariantFormatter().variants(CallableDescriptor(name)) == [name]
