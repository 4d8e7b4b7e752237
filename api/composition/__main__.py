import uvicorn

from .settings import settings

def main():
    uvicorn.run("composition.main:app", host=settings.API_HOST, port=settings.API_PORT)

if __name__ == "__main__":
    main()
