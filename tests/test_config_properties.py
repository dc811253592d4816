"""Property-based tests for blog config validation.

Key properties tested:
1. Any valid giscus combination survives a write/load round trip unchanged
2. String flags outside {"0", "1"} are always rejected
3. Values reach the embed script without re-encoding
"""

from __future__ import annotations

import json

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from blogconf.config import BLOG_CONFIG, FLAGS, INPUT_POSITIONS, MAPPINGS, SiteConfig
from blogconf.errors import ConfigError
from blogconf.giscus import data_attributes

_token = st.text(alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789_=-", min_size=1, max_size=40)
_slug = st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789-_.", min_size=1, max_size=20)

giscus_payloads = st.fixed_dictionaries(
    {
        "repo": st.tuples(_slug, _slug).map("/".join),
        "repoId": _token,
        "category": _token,
        "categoryId": _token,
        "mapping": st.sampled_from(MAPPINGS),
        "strict": st.sampled_from(FLAGS),
        "reactionsEnabled": st.sampled_from(FLAGS),
        "inputPosition": st.sampled_from(INPUT_POSITIONS),
        "lang": st.sampled_from(["en", "ko", "ja", "zh-CN", "de"]),
    }
)


def _with_giscus(giscus: dict) -> dict:
    data = json.loads(json.dumps(BLOG_CONFIG))
    data["giscus"] = giscus
    return data


@given(giscus_payloads)
@settings(max_examples=50, suppress_health_check=[HealthCheck.function_scoped_fixture])
def test_valid_giscus_round_trips(giscus):
    config = SiteConfig.from_blog_config(_with_giscus(giscus))
    assert config.as_blog_config()["giscus"] == giscus
    assert SiteConfig.from_blog_config(json.loads(config.to_json())) == config


@given(giscus_payloads, st.text(max_size=3).filter(lambda value: value not in FLAGS))
@settings(max_examples=50, suppress_health_check=[HealthCheck.function_scoped_fixture])
def test_non_flag_strings_rejected(giscus, flag):
    giscus = dict(giscus, reactionsEnabled=flag)
    with pytest.raises(ConfigError):
        SiteConfig.from_blog_config(_with_giscus(giscus))


@given(giscus_payloads)
@settings(max_examples=50, suppress_health_check=[HealthCheck.function_scoped_fixture])
def test_embed_attributes_preserve_values(giscus):
    config = SiteConfig.from_blog_config(_with_giscus(giscus))
    attributes = data_attributes(config.giscus)
    assert attributes["data-repo-id"] == giscus["repoId"]
    assert attributes["data-strict"] == giscus["strict"]
    assert attributes["data-reactions-enabled"] == giscus["reactionsEnabled"]
    assert attributes["data-input-position"] == giscus["inputPosition"]
