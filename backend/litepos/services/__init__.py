# Overview: Repositories over the storage gateway, one module per entity.
