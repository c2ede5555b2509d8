"""
Pulumi infrastructure-as-code for a Nextcloud scale set on Azure.

This package defines Azure infrastructure including:
- Resource group
- Storage account with an SMB file share for shared application data
- VNet with an NSG-protected subnet
- Public IP and Standard load balancer
- VM scale set running Nextcloud in Docker, with CPU-based autoscaling
"""
