from loadstart.errors import OwnerReferenceError
from loadstart.models import LoadTestJob, OwnerReference, StarterJob


def set_controller_reference(owner: LoadTestJob, obj: StarterJob) -> None:
    """
    Bind ``owner`` as the controlling owner of ``obj`` so the object is
    garbage collected with it.

    Setting the same controller twice is a no-op.
    """
    if owner.metadata.namespace != obj.metadata.namespace:
        raise OwnerReferenceError(
            f"Cross-namespace owner references are not allowed: owner {owner.namespace}/{owner.name}, object {obj.metadata.namespace}/{obj.metadata.name}"
        )

    if owner.metadata.uid == "":
        raise OwnerReferenceError(
            f"Owner {owner.namespace}/{owner.name} has no uid"
        )

    existing = obj.metadata.controller_reference()
    if existing and existing.uid != owner.metadata.uid:
        raise OwnerReferenceError(
            f"Object {obj.metadata.namespace}/{obj.metadata.name} is already controlled by {existing.kind} {existing.name}"
        )

    if existing:
        return

    obj.metadata.owner_references.append(
        OwnerReference(
            api_version=owner.api_version,
            kind=owner.kind,
            name=owner.name,
            uid=owner.metadata.uid,
            controller=True,
            block_owner_deletion=True,
        )
    )
