"""
Verification tool for FIPS-hardened Ubuntu stemcells (versioned base VM images).
Contains the following sub-packages:
- packages - loads reference package lists, normalizes installed package names and reconciles the two sets
- checks - individual assertions evaluated against a built image (kernel, SSH daemon, bootloader, package set)
- config - yaml settings of the tool
"""
