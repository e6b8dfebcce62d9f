from dataclasses import dataclass, field
from typing import Any

import msgspec

from .object_meta import ObjectMeta


@dataclass(slots=True)
class StarterContainer:
    name: str
    image: str
    command: list[str] = field(default_factory=list)


@dataclass(slots=True)
class StarterJob:
    metadata: ObjectMeta
    hostnames: list[str]
    container: StarterContainer
    restart_policy: str = "Never"
    api_version: str = "batch/v1"
    kind: str = "Job"

    def to_manifest(self) -> dict[str, Any]:
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "metadata": {
                "name": self.metadata.name,
                "namespace": self.metadata.namespace,
                "labels": dict(self.metadata.labels),
                "ownerReferences": [
                    {
                        "apiVersion": reference.api_version,
                        "kind": reference.kind,
                        "name": reference.name,
                        "uid": reference.uid,
                        "controller": reference.controller,
                        "blockOwnerDeletion": reference.block_owner_deletion,
                    } for reference in self.metadata.owner_references
                ],
            },
            "spec": {
                "template": {
                    "metadata": {
                        "labels": dict(self.metadata.labels),
                    },
                    "spec": {
                        "restartPolicy": self.restart_policy,
                        "containers": [
                            msgspec.to_builtins(self.container),
                        ],
                    },
                },
            },
        }
