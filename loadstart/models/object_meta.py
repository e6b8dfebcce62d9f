from dataclasses import dataclass, field


@dataclass(slots=True)
class OwnerReference:
    api_version: str
    kind: str
    name: str
    uid: str
    controller: bool = False
    block_owner_deletion: bool = False


@dataclass(slots=True)
class ObjectMeta:
    name: str
    namespace: str = "default"
    labels: dict[str, str] = field(default_factory=dict)
    uid: str = ""
    resource_version: int = 0
    owner_references: list[OwnerReference] = field(default_factory=list)

    @property
    def key(self) -> tuple[str, str]:
        return (self.namespace, self.name)

    def controller_reference(self) -> OwnerReference | None:
        for reference in self.owner_references:
            if reference.controller:
                return reference

        return None
