"""Shared test fixtures for the Pod validator."""

from __future__ import annotations

import pytest

from podvalidator.parser.loader import TrackedLoader
from podvalidator.service.driver import ManifestValidator
from podvalidator.tree.nodes import Node
from podvalidator.validator.pod import PodValidator


@pytest.fixture
def loader() -> TrackedLoader:
    return TrackedLoader()


@pytest.fixture
def validator() -> PodValidator:
    return PodValidator()


@pytest.fixture
def manifest_validator() -> ManifestValidator:
    return ManifestValidator()


def parse(loader: TrackedLoader, content: str) -> Node:
    root = loader.load_string(content)
    assert root is not None
    return root


MINIMAL_POD_YAML = """\
apiVersion: v1
kind: Pod
metadata:
  name: x
spec:
  containers:
    - name: c1
      image: "registry.bigbrother.io/app:1.0"
      resources: {}
"""

# Line numbers are referenced by the tests; keep the layout stable.
FULL_POD_YAML = """\
apiVersion: v1
kind: Pod
metadata:
  name: web
spec:
  os: linux
  containers:
    - name: frontend
      image: registry.bigbrother.io/team/frontend:2.3.1
      ports:
        - containerPort: 8080
          protocol: TCP
        - containerPort: 9090
      readinessProbe:
        httpGet:
          path: /ready
          port: 8080
      livenessProbe:
        httpGet:
          path: /healthz
          port: 8080
      resources:
        requests:
          cpu: 1
          memory: 256Mi
        limits:
          cpu: 2
          memory: 1Gi
    - name: sidecar
      image: registry.bigbrother.io/proxy:latest
      resources:
        limits:
          memory: 64Mi
"""

BROKEN_POD_YAML = """\
apiVersion: v2
kind: Deployment
metadata:
  name: ""
spec:
  os: macos
  containers:
    - name: app
      image: docker.io/app:1.0
      ports:
        - containerPort: "80"
          protocol: SCTP
        - containerPort: 70000
        - protocol: UDP
      readinessProbe:
        httpGet:
          path: ready
          port: http
      livenessProbe:
        exec: {}
      resources:
        requests:
          cpu: 0.5
          memory: 1.5Gi
        limits:
          memory: 2G
    - name: app
      image: registry.bigbrother.io/app
"""
