"""
Pulumi component resources for the Nextcloud scale set.

Each submodule provides reusable ComponentResource classes:
- storage: Storage account and SMB file share
- networking: VNet, subnet, NSG, public IP and load balancer
- compute: VM scale set and autoscale setting
"""
