from __future__ import annotations

from phone_cleaner.channels.storage import StorageChannel
from phone_cleaner.models.channel import MethodCall, ResponseStatus
from tests.conftest import STORAGE_CHANNEL, DiskUsage


def _channel(home_dir="/data") -> StorageChannel:
    return StorageChannel(name=STORAGE_CHANNEL, home_dir=home_dir)


def test_get_total_disk_space_returns_capacity(volumes) -> None:
    volumes["/data"] = DiskUsage(total=64_000_000_000, used=0, free=0)

    response = _channel().invoke(MethodCall(method="getTotalDiskSpace"))

    assert response.status == ResponseStatus.SUCCESS
    assert response.result == 64_000_000_000
    assert response.error is None


def test_arguments_are_ignored(volumes) -> None:
    volumes["/data"] = DiskUsage(total=42, used=0, free=0)

    response = _channel().invoke(MethodCall(method="getTotalDiskSpace", arguments={"path": "/etc"}))

    assert response.result == 42


def test_failed_lookup_is_a_zero_success(volumes) -> None:
    response = _channel("/nowhere").invoke(MethodCall(method="getTotalDiskSpace"))

    assert response.status == ResponseStatus.SUCCESS
    assert response.result == 0


def test_unknown_method_is_not_implemented(volumes) -> None:
    volumes["/data"] = DiskUsage(total=42, used=0, free=0)

    for method in ("foo", "unknownMethod", "gettotaldiskspace", ""):
        response = _channel().invoke(MethodCall(method=method))
        assert response.status == ResponseStatus.NOT_IMPLEMENTED
        assert response.result is None
        assert response.error is None


def test_info_lists_the_single_method() -> None:
    info = _channel().info()

    assert info.name == STORAGE_CHANNEL
    assert info.methods == ["getTotalDiskSpace"]
