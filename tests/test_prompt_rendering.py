from __future__ import annotations

import pytest
from pydantic import BaseModel

from tripbot.domain.rendering import (
    VariableBag,
    conditionals,
    dotted_access,
    interpolate,
    iterations,
    run_pipeline,
)


def _bag(**variables) -> VariableBag:
    return VariableBag(variables)


# ---------------------------------
# Interpolation
# ---------------------------------


def test_interpolation_substitutes_present_keys() -> None:
    assert interpolate('Hello {{name}}', _bag(name='Alice')) == 'Hello Alice'


def test_interpolation_leaves_missing_keys_verbatim() -> None:
    assert interpolate('Hello {{missing}}', _bag()) == 'Hello {{missing}}'


def test_interpolation_substitutes_falsy_values() -> None:
    assert interpolate('a{{n}}b{{s}}c', _bag(n=0, s='')) == 'a0bc'


def test_interpolation_string_forms() -> None:
    text = '{{yes}} {{no}} {{nothing}} {{items}} {{ratio}}'
    rendered = interpolate(text, _bag(yes=True, no=False, nothing=None, items=[1, 'a'], ratio=1.5))
    assert rendered == 'true false null 1,a 1.5'


def test_interpolation_ignores_dotted_and_block_tokens() -> None:
    text = '{{#if a}}{{user.name}}{{/if}}'
    assert interpolate(text, _bag(a='x', user={'name': 'n'})) == text


# ---------------------------------
# Conditionals
# ---------------------------------


@pytest.mark.parametrize('flag', [True, 1, 'yes', [], {}])
def test_conditional_keeps_body_when_truthy(flag) -> None:
    assert conditionals('{{#if flag}}X{{/if}}', _bag(flag=flag)) == 'X'


@pytest.mark.parametrize('flag', [False, 0, 0.0, '', None, float('nan')])
def test_conditional_drops_body_when_falsy(flag) -> None:
    assert conditionals('{{#if flag}}X{{/if}}', _bag(flag=flag)) == ''


def test_conditional_drops_body_when_missing() -> None:
    assert conditionals('a{{#if flag}}X{{/if}}b', _bag()) == 'ab'


def test_conditional_spans_lines() -> None:
    assert conditionals('{{#if a}}\nline\n{{/if}}', _bag(a=True)) == '\nline\n'


def test_conditional_closes_at_first_end_tag() -> None:
    text = '{{#if a}}A{{#if b}}B{{/if}}C{{/if}}'
    assert conditionals(text, _bag(a=True, b=False)) == 'A{{#if b}}BC{{/if}}'


def test_unmatched_conditional_is_left_as_text() -> None:
    text = '{{#if a}}never closed'
    assert conditionals(text, _bag(a=True)) == text


# ---------------------------------
# Iteration
# ---------------------------------


def test_each_over_objects() -> None:
    text = '{{#each items}}{{name}}-{{/each}}'
    assert iterations(text, _bag(items=[{'name': 'a'}, {'name': 'b'}])) == 'a-b-'


def test_each_over_scalars() -> None:
    text = '{{#each items}}{{this}},{{/each}}'
    assert iterations(text, _bag(items=[1, 2, 3])) == '1,2,3,'


def test_each_over_tuple() -> None:
    text = '{{#each items}}{{this}};{{/each}}'
    assert iterations(text, _bag(items=('x', None))) == 'x;null;'


@pytest.mark.parametrize('value', ['abc', 3, {'name': 'a'}, None])
def test_each_over_non_sequence_renders_empty(value) -> None:
    assert iterations('[{{#each items}}x{{/each}}]', _bag(items=value)) == '[]'


def test_each_over_missing_renders_empty() -> None:
    assert iterations('[{{#each items}}x{{/each}}]', _bag()) == '[]'


def test_each_leaves_unknown_properties() -> None:
    text = '{{#each items}}{{name}}{{age}}{{/each}}'
    assert iterations(text, _bag(items=[{'name': 'a'}])) == 'a{{age}}'


def test_each_over_nested_sequences_uses_indexes() -> None:
    text = '{{#each pairs}}{{0}}/{{1}} {{/each}}'
    assert iterations(text, _bag(pairs=[['a', 'b'], ['c', 'd']])) == 'a/b c/d '


class _Message(BaseModel):
    role: str
    content: str


def test_each_over_pydantic_models() -> None:
    text = '{{#each messages}}{{role}}: {{content}}\n{{/each}}'
    messages = [_Message(role='user', content='hi'), _Message(role='assistant', content='hello')]
    assert iterations(text, _bag(messages=messages)) == 'user: hi\nassistant: hello\n'


# ---------------------------------
# Dotted access
# ---------------------------------


def test_dotted_access_resolves_property() -> None:
    assert dotted_access('{{user.email}}', _bag(user={'email': 'a@b.com'})) == 'a@b.com'


def test_dotted_access_leaves_missing_property() -> None:
    assert dotted_access('{{user.email}}', _bag(user={})) == '{{user.email}}'


@pytest.mark.parametrize('user', [None, 'x', ['a'], 0])
def test_dotted_access_requires_object(user) -> None:
    assert dotted_access('{{user.email}}', _bag(user=user)) == '{{user.email}}'


def test_dotted_access_is_one_level_only() -> None:
    text = '{{a.b.c}}'
    assert dotted_access(text, _bag(a={'b': {'c': 1}})) == text


def test_dotted_access_substitutes_falsy_property() -> None:
    assert dotted_access('[{{trip.travelers}}]', _bag(trip={'travelers': 0})) == '[0]'


# ---------------------------------
# Pipeline
# ---------------------------------


def test_plain_template_only_substitutes_known_keys() -> None:
    assert run_pipeline('plain {{a}} text {{b}}', {'a': 1}) == 'plain 1 text {{b}}'


def test_pipeline_resolves_outer_dotted_tokens_after_iteration() -> None:
    text = '{{#each items}}{{name}}@{{trip.city}} {{/each}}'
    variables = {'items': [{'name': 'a'}, {'name': 'b'}], 'trip': {'city': 'Rome'}}
    assert run_pipeline(text, variables) == 'a@Rome b@Rome '


def test_pipeline_does_not_resolve_item_dotted_tokens() -> None:
    text = '{{#each items}}{{user.name}};{{/each}}'
    assert run_pipeline(text, {'items': [{'user': {'name': 'x'}}]}) == '{{user.name}};'


def test_pipeline_interpolates_before_iterating() -> None:
    text = '{{#each items}}{{name}} {{/each}}'
    assert run_pipeline(text, {'name': 'top', 'items': [{'name': 'a'}]}) == 'top '


def test_pipeline_is_repeatable() -> None:
    text = 'Hi {{name}}{{#if vip}}!{{/if}}'
    variables = {'name': 'Ann', 'vip': True}
    assert run_pipeline(text, variables) == run_pipeline(text, variables) == 'Hi Ann!'


def test_dotted_access_indexes_sequences() -> None:
    bag = _bag(items=['x', 'y'])
    assert dotted_access('{{items.0}}/{{items.1}}', bag) == 'x/y'
    assert dotted_access('{{items.2}}', bag) == '{{items.2}}'
    assert dotted_access('{{items.first}}', bag) == '{{items.first}}'
