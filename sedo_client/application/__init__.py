# Application Layer - Sedo
# Contains ports (interfaces) the client depends on
