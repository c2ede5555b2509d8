"""
Tests for the scale set boot script.

Validates:
1. The script mounts the share with the storage account name and key it is given
2. Steps run in order: install, credentials, fstab, mount, container
3. The container gets port 80 and its bind-mounted data directories
4. Custom data encoding and its size limit
"""

import base64

import pytest

from nextcloud_iac.exceptions import BootScriptError
from nextcloud_iac.provisioning.boot_script import (
    ContainerSpec,
    FileShareMount,
    encode_custom_data,
    render_boot_script,
)

ACCOUNT = "nextclouddevstorab12cd34"
KEY = "c2VjcmV0LWtleQ+/abc=="


@pytest.fixture
def mount():
    return FileShareMount(account_name=ACCOUNT, account_key=KEY)


@pytest.fixture
def script(mount):
    container = ContainerSpec(environment={"TRUSTED_PROXIES": "203.0.113.10"})
    return render_boot_script(mount, container)


class TestFileShareMount:
    """Derived mount values."""

    def test_unc_path(self, mount):
        """UNC path should point at the account's file endpoint and share."""
        assert mount.unc_path == f"//{ACCOUNT}.file.core.windows.net/nextcloud"

    def test_credentials_file(self, mount):
        """Credentials file should be named after the storage account."""
        assert mount.credentials_file == f"/etc/smbcredentials/{ACCOUNT}.cred"

    def test_fstab_entry(self, mount):
        """fstab entry should be a nofail cifs mount with the credentials file."""
        fields = mount.fstab_entry.split()

        assert fields[0] == mount.unc_path
        assert fields[1] == "/mnt/nextcloud"
        assert fields[2] == "cifs"
        assert fields[3].startswith(f"nofail,credentials={mount.credentials_file},")
        assert "actimeo=30" in fields[3]


class TestRenderBootScript:
    """render_boot_script output."""

    def test_starts_with_shebang(self, script):
        """Script should be a bash script that stops on the first failure."""
        lines = script.splitlines()

        assert lines[0] == "#!/bin/bash"
        assert "set -e" in lines

    def test_uses_storage_account_name_and_key(self, script):
        """Credentials should be exactly the storage account name and key."""
        assert f"username={ACCOUNT}" in script
        assert f"password={KEY}" in script
        assert "Output" not in script

    def test_credentials_file_is_private(self, script, mount):
        """Credentials file should be created 0600 before the key is written."""
        create = f"install -m 600 /dev/null {mount.credentials_file}"

        assert create in script
        assert script.index(create) < script.index(f"cat > {mount.credentials_file}")
        assert script.index(create) < script.index(f"password={KEY}")

    def test_steps_in_order(self, script, mount):
        """Install, credentials, fstab, mount and container should run in that order."""
        positions = [
            script.index("apt-get install -y docker-ce"),
            script.index(f"mkdir -p {mount.mount_point}"),
            script.index(f"username={ACCOUNT}"),
            script.index(">> /etc/fstab"),
            script.index("mount -t cifs"),
            script.index("docker run"),
        ]

        assert positions == sorted(positions)

    def test_installs_cifs_utils(self, script):
        """mount -t cifs needs cifs-utils on Ubuntu."""
        assert "cifs-utils" in script

    def test_container_command(self, script):
        """Container should expose port 80 and bind-mount the data directories."""
        run_line = next(line for line in script.splitlines() if line.startswith("docker run"))

        assert "-p 80:80" in run_line
        assert "-e TRUSTED_PROXIES=203.0.113.10" in run_line
        assert "-v /mnt/nextcloud/nextcloud:/var/www/html" in run_line
        assert "-v /mnt/nextcloud/custom_apps:/var/www/html/custom_apps" in run_line
        assert "-v /mnt/nextcloud/config:/var/www/html/config" in run_line
        assert "-v /mnt/nextcloud/data:/var/www/html/data" in run_line
        assert run_line.endswith("nextcloud:30.0.4-apache")

    def test_custom_image(self, mount):
        """A configured image should replace the default."""
        script = render_boot_script(mount, ContainerSpec(image="nextcloud:31-apache"))

        assert script.rstrip().endswith("nextcloud:31-apache")

    def test_quotes_environment_values(self, mount):
        """Environment values with spaces should be shell-quoted."""
        container = ContainerSpec(environment={"TRUSTED_PROXIES": "10.0.0.1 10.0.0.2"})
        script = render_boot_script(mount, container)

        assert "-e 'TRUSTED_PROXIES=10.0.0.1 10.0.0.2'" in script

    def test_missing_key_rejected(self):
        """An empty key means the storage outputs were not resolved."""
        with pytest.raises(BootScriptError):
            render_boot_script(FileShareMount(account_name=ACCOUNT, account_key=""), ContainerSpec())


class TestEncodeCustomData:
    """encode_custom_data behaviour."""

    def test_decodes_to_script(self, script):
        """Encoded custom data should decode back to the script."""
        encoded = encode_custom_data(script)

        assert base64.b64decode(encoded).decode("utf-8") == script

    def test_size_limit(self):
        """Payloads over the custom data limit should be rejected."""
        with pytest.raises(BootScriptError) as exc_info:
            encode_custom_data("x" * 60000)

        assert exc_info.value.details["limit"] == 65535
