import os

from dotenv import load_dotenv

load_dotenv()

# Permite configurar host e porta por variável de ambiente
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "4000"))

# Inicializa o servidor FastAPI via Uvicorn
if __name__ == "__main__":
    import uvicorn
    from main import app
    uvicorn.run(app, host=HOST, port=PORT, log_level="info", reload=False)
