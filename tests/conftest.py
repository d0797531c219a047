"""Shared pytest fixtures for Docker API schema tests."""

import json
from pathlib import Path
from typing import Any

import pytest

from docker_api_schema.core import settings as settings_module
from docker_api_schema.core.settings import SchemaSettings


@pytest.fixture
def list_container_payload() -> dict[str, Any]:
    """One entry of GET /containers/json as returned by the engine."""
    return {
        "Id": "8dfafdbc3a40",
        "Names": ["/boring_feynman"],
        "Image": "ubuntu:latest",
        "ImageID": "sha256:d74508fb6632491cea586a1fd7d748dfc5274cd6fdfedee309ecdcbc2bf5cb82",
        "Command": "echo 1",
        "Created": 1367854155,
        "State": "Exited",
        "Status": "Exit 0",
        "Ports": [{"PrivatePort": 2222, "PublicPort": 3333, "Type": "tcp"}],
        "Labels": {"com.example.vendor": "Acme", "com.example.version": "1.0"},
        "SizeRw": 12288,
        "SizeRootFs": 0,
        "HostConfig": {"NetworkMode": "default"},
        "NetworkSettings": {
            "Networks": {
                "bridge": {
                    "NetworkID": "7ea29fc1412292a2d7bba362f9253545fecdfa8ce9a6e37dd10ba8bee7129812",
                    "EndpointID": "2cdc4edb1ded3631c81f57966563e5c8525b81121bb3706a9a9a3ae102711f3f",
                    "Gateway": "172.17.0.1",
                    "IPAddress": "172.17.0.2",
                    "IPPrefixLen": 16,
                    "IPv6Gateway": "",
                    "GlobalIPv6Address": "",
                    "MacAddress": "02:42:ac:11:00:02",
                }
            }
        },
        "Mounts": [
            {
                "Target": "/data",
                "Source": "/var/lib/docker/volumes/data/_data",
                "Type": "volume",
                "Readonly": False,
            }
        ],
    }


@pytest.fixture
def container_create_payload() -> dict[str, Any]:
    """Body of POST /containers/create."""
    return {
        "Hostname": "web",
        "User": "www-data",
        "AttachStdout": True,
        "ExposedPorts": {"80/tcp": {}},
        "Env": ["FOO=bar", "BAZ"],
        "Cmd": ["nginx", "-g", "daemon off;"],
        "Healthcheck": {
            "Test": ["CMD-SHELL", "curl -f http://localhost/ || exit 1"],
            "Interval": 30_000_000_000,
            "Timeout": 5_000_000_000,
            "Retries": 3,
            "StartPeriod": 0,
        },
        "Image": "nginx:alpine",
        "Volumes": {"/var/cache/nginx": {}},
        "WorkingDir": "/srv",
        "Labels": {"tier": "frontend"},
        "StopSignal": "SIGTERM",
        "StopTimeout": 10,
        "HostConfig": {
            "NetworkMode": "bridge",
            "PortBindings": {"80/tcp": [{"HostIp": "0.0.0.0", "HostPort": "8080"}]},
            "CapAdd": ["NET_ADMIN"],
            "Mounts": [{"Type": "bind", "Source": "/srv/www", "Target": "/srv", "ReadOnly": True}],
            "AutoRemove": True,
        },
        "NetworkingConfig": {
            "Networks": {"frontend": {"Aliases": ["web"], "IPAMConfig": {"IPv4Address": "10.0.0.5"}}}
        },
    }


@pytest.fixture
def payload_file(tmp_path: Path):
    """Write a payload to a temporary JSON file and return its path."""

    def _write(payload: Any, name: str = "payload.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def strict_settings(monkeypatch: pytest.MonkeyPatch) -> SchemaSettings:
    """Swap in settings with strict validation enabled."""
    strict = SchemaSettings(DOCKER_SCHEMA_STRICT=True)
    monkeypatch.setattr(settings_module, "settings", strict)
    return strict


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove settings-related environment variables."""
    for var in ("DOCKER_SCHEMA_STRICT", "LOG_LEVEL", "LOG_DIR", "LOG_MAX_FILE_SIZE_MB"):
        monkeypatch.delenv(var, raising=False)
