"""Storage channel: answers getTotalDiskSpace for the app's home volume."""

from pathlib import Path
from typing import Any, Union

from ..models.channel import MethodCall
from ..services.disk_space import get_total_disk_space
from .base import BaseChannel, MethodNotImplemented

GET_TOTAL_DISK_SPACE = "getTotalDiskSpace"


class StorageChannel(BaseChannel):
    description = "Native storage queries"
    methods = (GET_TOTAL_DISK_SPACE,)

    def __init__(self, name: str, home_dir: Union[str, Path]):
        self.name = name
        self.home_dir = home_dir

    def handle(self, call: MethodCall) -> Any:
        if call.method == GET_TOTAL_DISK_SPACE:
            return get_total_disk_space(self.home_dir)
        raise MethodNotImplemented(call.method)
