"""Service layer: backend client, local store, purchase signal and the activation gate."""
