# Schemas Pydantic da API
