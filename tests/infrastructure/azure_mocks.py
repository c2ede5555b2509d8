"""
Pulumi mock runtime shared by the infrastructure tests.

Installed once from conftest so every test module sees the same mocks and a
configured project name (pulumi.Config() needs one).
"""

import pulumi
from pulumi.runtime import MockCallArgs, MockResourceArgs, Mocks

PROJECT = "nextcloud-iac"
SUBSCRIPTION = "00000000-0000-0000-0000-000000000000"
PUBLIC_IP = "203.0.113.10"
STORAGE_KEY = "bW9jay1zdG9yYWdlLWtleQ=="

# Wire envelope the engine uses for secret values
SECRET_SIG_KEY = "4dabf18193072939515e22adb298388d"
SECRET_SIG = "1b47061264138c4ac30d75fd1eb44270"

# Azure returns these inputs as the resource "name" output
_NAME_INPUTS = {
    "azure-native:storage:FileShare": "shareName",
    "azure-native:network:LoadBalancer": "loadBalancerName",
}


def unwrap_secrets(value):
    """Strip secret envelopes from a serialized property tree."""
    if isinstance(value, dict):
        if value.get(SECRET_SIG_KEY) == SECRET_SIG:
            return unwrap_secrets(value.get("value"))
        return {key: unwrap_secrets(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [unwrap_secrets(item) for item in value]
    return value


def get_prop(props: dict, key: str):
    """Look up a property regardless of camelCase/snake_case wire naming."""
    wanted = key.replace("_", "").lower()
    for name, value in props.items():
        if name.replace("_", "").lower() == wanted:
            return value
    raise KeyError(key)


def has_prop(props: dict, key: str) -> bool:
    try:
        get_prop(props, key)
    except KeyError:
        return False
    return True


class AzureMocks(Mocks):
    """Records every declared resource and fakes Azure-computed outputs."""

    def __init__(self) -> None:
        self.resources: dict[str, dict] = {}

    def new_resource(self, args: MockResourceArgs):
        outputs = dict(args.inputs)
        inputs = unwrap_secrets(dict(args.inputs))
        name_input = _NAME_INPUTS.get(args.typ)
        if name_input and has_prop(inputs, name_input):
            outputs["name"] = get_prop(inputs, name_input)
        outputs.setdefault("name", args.name)
        if args.typ == "azure-native:network:PublicIPAddress":
            outputs["ipAddress"] = PUBLIC_IP
        self.resources[args.name] = {"type": args.typ, "inputs": inputs}
        return [f"{args.name}_id", outputs]

    def call(self, args: MockCallArgs):
        if args.token == "azure-native:storage:listStorageAccountKeys":
            return {
                "keys": [
                    {"keyName": "key1", "permissions": "Full", "value": STORAGE_KEY},
                    {"keyName": "key2", "permissions": "Full", "value": "c2Vjb25kYXJ5"},
                ],
            }
        return {}

    def inputs_of(self, name: str) -> dict:
        """Inputs a resource was declared with, secrets unwrapped."""
        return self.resources[name]["inputs"]


MOCKS = AzureMocks()


def install() -> AzureMocks:
    pulumi.runtime.set_mocks(MOCKS, project=PROJECT, stack="test", preview=False)
    return MOCKS
