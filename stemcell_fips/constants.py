import re

DEFAULT_OS_NAME = "ubuntu-jammy"

SELECTIONS_COMMAND = "dpkg --get-selections"

LINUX_VERSION_RE = re.compile(r"linux-(.+)-([0-9]+)\.([0-9]+)\.([0-9]+)-([0-9]+)")
LINUX_VERSION_REPLACEMENT = r"linux-\1-\2.\3"

BASE_PACKAGE_LIST = "dpkg-list-{os_name}.txt"
FIPS_PACKAGE_LIST = "dpkg-list-{os_name}-fips.txt"
ADDITIONS_PACKAGE_LIST = "dpkg-list-{os_name}-{platform}-additions.txt"

SSHD_CONFIG_PATH = "/etc/ssh/sshd_config"
GRUB_CONFIG_PATH = "/boot/grub/grub.cfg"

APPROVED_MACS = (
    "hmac-sha2-512-etm@openssh.com",
    "hmac-sha2-256-etm@openssh.com",
    "hmac-sha2-512",
    "hmac-sha2-256",
)
SSH_HOST_KEYS = (
    "HostKey /etc/ssh/ssh_host_rsa_key",
    "HostKey /etc/ssh/ssh_host_ecdsa_key",
)
HOST_KEY_LINE_RE = re.compile(r"^HostKey.*", re.MULTILINE)

FIPS_KERNEL_LINE_RE = re.compile(r"linux\t/boot/vmlinuz-\S+-fips root=UUID=\S* ro ")
FIPS_INITRD_LINE_RE = re.compile(r"initrd\t/boot/initrd.img-\S+-fips")

FIPS_KERNEL_PACKAGE = "linux-image-fips"
FORBIDDEN_KERNEL_PACKAGES = (
    "linux-generic-hwe-22.04",
    "linux-image-5.19.0-109-generic",
)

EXIT_OK = 0
EXIT_CHECKS_FAILED = 1
EXIT_CONFIG_ERROR = 2
