from __future__ import annotations

import asyncio
from itertools import count

import pytest

from termcase.core import TranslationError, TranslationPair
from termcase.core.adapters import OpenAITranslator, TranslationAdapter
from termcase.naming import FormatMode
from termcase.pipeline import epoch_millis, format_results, split_terms, translate_terms
from tests.fixtures import openai_fake


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("总数\n返回数", ["总数", "返回数"]),
        (" 总数 , 返回数,,\n\n", ["总数", "返回数"]),
        ("   \n , ", []),
        ("user id", ["user id"]),
    ],
)
def test_split_terms(raw, expected):
    assert split_terms(raw) == expected


def test_format_results_stamps_each_record():
    clock = count(1000).__next__
    pairs = [TranslationPair(original="总数", translated="total count")]

    [result] = format_results(pairs, FormatMode.CAMEL_CASE, clock=clock)

    assert result.original == "总数"
    assert result.translated == "total count"
    assert result.formatted == "totalCount"
    assert result.timestamp == 1000


def test_epoch_millis_is_milliseconds():
    assert epoch_millis() > 1_600_000_000_000


def test_translate_terms_end_to_end():
    client = openai_fake.build_client(openai_fake.translations_completion(openai_fake.sample_pairs()))
    translator = OpenAITranslator(client, default_model="gpt-4o-mini")

    results = asyncio.run(translate_terms(["总数", "返回数"], FormatMode.PASCAL_CASE, translator, clock=lambda: 7))

    assert [result.formatted for result in results] == ["TotalCount", "ReturnCount"]
    assert [result.original for result in results] == ["总数", "返回数"]
    assert {result.timestamp for result in results} == {7}


def test_untranslated_terms_format_to_empty_identifiers():
    class EchoTranslator(TranslationAdapter):
        async def translate_batch(self, terms, /):
            return [TranslationPair(original=term, translated=term) for term in terms]

    results = asyncio.run(translate_terms(["总记录数"], "PascalCase", EchoTranslator()))

    assert results[0].formatted == ""


def test_translation_errors_propagate():
    client = openai_fake.build_client(openai_fake.completion('{"items": []}'))
    translator = OpenAITranslator(client, default_model="gpt-4o-mini")

    with pytest.raises(TranslationError):
        asyncio.run(translate_terms(["总数"], FormatMode.PASCAL_CASE, translator))
