"""
Boot script for scale set instances.

Runs ONCE at first boot (cloud-init custom data or the CustomScript extension),
as root, in this fixed order:
1. Install Docker Engine and CIFS utilities.
2. Create the mount point and an SMB credentials file (mode 600) holding the
   storage account name and primary key.
3. Append the share to /etc/fstab so it survives reboots.
4. Mount the share.
5. Start the application container on port 80 with its data directories
   bind-mounted from the share.

Everything here works on resolved strings; callers resolve storage names and
keys with Output.apply before rendering.
"""

import base64
import shlex
from dataclasses import dataclass, field

from nextcloud_iac.configs.constants import (
    CONTAINER_IMAGE,
    CONTAINER_PORT,
    CONTAINER_VOLUMES,
    CUSTOM_DATA_MAX_BYTES,
    FILE_ENDPOINT_SUFFIX,
    MOUNT_OPTIONS,
    MOUNT_POINT,
    SHARE_NAME,
    SMB_CREDENTIALS_DIR,
)
from nextcloud_iac.exceptions import BootScriptError


@dataclass(frozen=True)
class FileShareMount:
    """SMB share mount parameters derived from the storage declarations."""
    account_name: str
    account_key: str
    share_name: str = SHARE_NAME
    mount_point: str = MOUNT_POINT
    credentials_dir: str = SMB_CREDENTIALS_DIR
    options: tuple[str, ...] = MOUNT_OPTIONS

    @property
    def unc_path(self) -> str:
        return f"//{self.account_name}.{FILE_ENDPOINT_SUFFIX}/{self.share_name}"

    @property
    def credentials_file(self) -> str:
        return f"{self.credentials_dir}/{self.account_name}.cred"

    @property
    def mount_options(self) -> str:
        """Comma-separated options passed to mount -o."""
        return ",".join((f"credentials={self.credentials_file}", *self.options))

    @property
    def fstab_entry(self) -> str:
        return f"{self.unc_path} {self.mount_point} cifs nofail,{self.mount_options} 0 0"


@dataclass(frozen=True)
class ContainerSpec:
    """Single application container started after the share is mounted."""
    image: str = CONTAINER_IMAGE
    host_port: int = CONTAINER_PORT
    container_port: int = CONTAINER_PORT
    environment: dict[str, str] = field(default_factory=dict)
    # subdirectory of the mount point -> path inside the container
    volumes: dict[str, str] = field(default_factory=lambda: dict(CONTAINER_VOLUMES))

    def run_command(self, mount_point: str) -> str:
        """Build the docker run command line."""
        parts = [
            "docker run --init --restart always -d",
            f"-p {self.host_port}:{self.container_port}",
        ]
        for key, value in self.environment.items():
            parts.append(f"-e {shlex.quote(f'{key}={value}')}")
        for subdir, target in self.volumes.items():
            parts.append(f"-v {mount_point}/{subdir}:{target}")
        parts.append(shlex.quote(self.image))
        return " ".join(parts)


def _install_docker() -> list[str]:
    return [
        "# Install Docker Engine and CIFS utilities",
        "apt-get update",
        "apt-get install -y ca-certificates curl gnupg cifs-utils",
        "install -m 0755 -d /etc/apt/keyrings",
        "curl -fsSL https://download.docker.com/linux/ubuntu/gpg"
        " | gpg --dearmor --yes -o /etc/apt/keyrings/docker.gpg",
        "chmod a+r /etc/apt/keyrings/docker.gpg",
        'echo "deb [arch=$(dpkg --print-architecture) signed-by=/etc/apt/keyrings/docker.gpg]'
        ' https://download.docker.com/linux/ubuntu $(. /etc/os-release && echo $VERSION_CODENAME) stable"'
        " > /etc/apt/sources.list.d/docker.list",
        "apt-get update",
        "apt-get install -y docker-ce docker-ce-cli containerd.io",
    ]


def _mount_share(mount: FileShareMount) -> list[str]:
    return [
        "# Mount Azure file share",
        f"mkdir -p {mount.mount_point}",
        f"mkdir -p {mount.credentials_dir}",
        f"install -m 600 /dev/null {mount.credentials_file}",
        f"cat > {mount.credentials_file} << 'EOF'",
        f"username={mount.account_name}",
        f"password={mount.account_key}",
        "EOF",
        f"echo {shlex.quote(mount.fstab_entry)} >> /etc/fstab",
        f"mount -t cifs {mount.unc_path} {mount.mount_point} -o {mount.mount_options}",
    ]


def render_boot_script(mount: FileShareMount, container: ContainerSpec) -> str:
    """
    Render the first-boot shell script.

    Args:
        mount: File share mount parameters (resolved account name and key)
        container: Application container to start

    Returns:
        Bash script text

    Raises:
        BootScriptError: If the storage account name or key is empty
    """
    if not mount.account_name or not mount.account_key:
        raise BootScriptError(
            "Boot script needs a resolved storage account name and key",
            details={"account_name": mount.account_name or None},
        )

    lines = [
        "#!/bin/bash",
        "set -e",
        "",
        *_install_docker(),
        "",
        *_mount_share(mount),
        "",
        "# Run application container",
        container.run_command(mount.mount_point),
    ]
    return "\n".join(lines) + "\n"


def encode_custom_data(script: str) -> str:
    """
    Base64-encode a script for VM custom data or CustomScript settings.

    Raises:
        BootScriptError: If the encoded script exceeds the custom data limit
    """
    encoded = base64.b64encode(script.encode("utf-8")).decode("ascii")
    if len(encoded) > CUSTOM_DATA_MAX_BYTES:
        raise BootScriptError(
            "Encoded boot script exceeds the custom data size limit",
            details={"size": len(encoded), "limit": CUSTOM_DATA_MAX_BYTES},
        )
    return encoded
