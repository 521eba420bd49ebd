import logging

from . import create_app

logger = logging.getLogger("demo_api")

ENDPOINTS = [
    ("GET", "/api/users", "list users"),
    ("GET", "/api/users/:id", "get a user"),
    ("POST", "/api/users", "create a user"),
    ("PUT", "/api/users/:id", "update a user"),
    ("DELETE", "/api/users/:id", "delete a user"),
    ("GET", "/api/posts", "list posts"),
    ("GET", "/api/posts/:id", "get a post"),
    ("POST", "/api/posts", "create a post"),
    ("POST", "/api/test/echo", "echo the request body"),
    ("GET", "/api/test/delay", "respond after ?ms milliseconds"),
    ("POST", "/api/test/validate", "validate username and password"),
]


def log_banner(port: int) -> None:
    lines = [
        "Server started",
        f"  Local:       http://localhost:{port}",
        f"  API tester:  http://localhost:{port}/index.html",
        "  Endpoints:",
    ]
    lines += [f"    {method:<7}{path:<20} {desc}" for method, path, desc in ENDPOINTS]
    logger.info("\n".join(lines))


def main() -> None:
    app = create_app()
    port = int(app.config.get("PORT", 3000))
    log_banner(port)
    app.run(host=app.config.get("HOST", "0.0.0.0"), port=port, debug=app.config.get("DEBUG", False), threaded=True)


if __name__ == "__main__":
    main()
