# Routers da API
