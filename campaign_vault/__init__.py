"""Campaign Vault — catalog storage for a virtual-tabletop campaign manager."""
