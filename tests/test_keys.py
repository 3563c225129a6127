#!/usr/bin/env python3
"""
KUBECODEC TEST SUITE - Manifest Identity Keys
---------------------------------------------
Looking up decoded manifests by apiVersion, kind, namespace and name.
"""

import pytest

from kubecodec import (
    ManifestCodec, MappingValue, StringValue, ValidationError, decode_multi,
    documents_by_key, manifest_key,
)

BUNDLE = """\
apiVersion: v1
kind: Namespace
metadata:
  name: shop
---
apiVersion: apps/v1
kind: Deployment
metadata:
  name: web
  namespace: shop
---
apiVersion: v1
kind: Service
metadata:
  name: web
  namespace: shop
"""


def test_namespaced_key():
    doc = decode_multi(BUNDLE)[1]
    assert manifest_key(doc) == "apps/v1_Deployment_shop_web"


def test_cluster_scoped_key_has_no_namespace_part():
    doc = decode_multi(BUNDLE)[0]
    assert manifest_key(doc) == "v1_Namespace_shop"


def test_empty_namespace_counts_as_cluster_scoped():
    doc = MappingValue((
        ("apiVersion", StringValue("v1")),
        ("kind", StringValue("ClusterRole")),
        ("metadata", MappingValue((("name", StringValue("reader")), ("namespace", StringValue(""))))),
    ))
    assert manifest_key(doc) == "v1_ClusterRole_reader"


def test_documents_by_key_keeps_stream_order():
    manifests = documents_by_key(BUNDLE)
    assert list(manifests) == ["v1_Namespace_shop", "apps/v1_Deployment_shop_web", "v1_Service_shop_web"]
    assert manifests["v1_Service_shop_web"]["kind"] == StringValue("Service")


def test_duplicate_keys_are_rejected():
    """
    UNIQUENESS TEST: two documents for the same object cannot both be
    indexed; the second one names the clash.
    """
    text = BUNDLE + "---\napiVersion: apps/v1\nkind: Deployment\nmetadata:\n  name: web\n  namespace: shop\n"
    result = decode_multi(text)
    assert len(result) == 4
    with pytest.raises(ValidationError) as exc:
        result.by_key()
    assert "apps/v1_Deployment_shop_web" in str(exc.value)


def test_same_name_in_other_namespace_is_not_a_duplicate():
    text = BUNDLE + "---\napiVersion: apps/v1\nkind: Deployment\nmetadata:\n  name: web\n  namespace: staging\n"
    assert len(ManifestCodec().documents_by_key(text)) == 4


@pytest.mark.parametrize("text, field", [
    ("apiVersion: v1\nkind: Pod\nmetadata: {}\n", "metadata.name"),
    ("apiVersion: v1\nkind: 7\nmetadata:\n  name: x\n", "kind"),
])
def test_unidentifiable_manifest(text, field):
    with pytest.raises(ValidationError) as exc:
        documents_by_key(text)
    assert exc.value.field == field
