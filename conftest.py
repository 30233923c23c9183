def pytest_addoption(parser):
    parser.addoption(
        "--app-host",
        action="store",
        default=None,
        help="Base URL of a running posts admin service for the e2e scenario, "
        "e.g. http://localhost:8080",
    )
