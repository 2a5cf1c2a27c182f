"""Entry points for the auth, customer and policy services.

Each module exposes `create_app()` returning a FastAPI application and
`main()` running it under uvicorn. Only the auth service carries startup
tasks: it seeds the default admin account before serving.

"""
