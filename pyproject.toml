[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netlab"
version = "0.1.0"
description = "Small networking exercises: distance vector routing, leaky bucket, stop-and-wait, file transfer and TCP/UDP messaging"
requires-python = ">=3.10"
dependencies = []
keywords = ["networking", "routing", "distance-vector", "leaky-bucket", "stop-and-wait", "sockets", "tcp", "udp"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
netlab-dvr = "netlab.dvr:main"
netlab-leaky-bucket = "netlab.leaky_bucket:main"
netlab-ftp-server = "netlab.ftp:server_main"
netlab-ftp-client = "netlab.ftp:client_main"
netlab-snw-sender = "netlab.stopwait:sender_main"
netlab-snw-receiver = "netlab.stopwait:receiver_main"
netlab-tcp-server = "netlab.tcpchat:server_main"
netlab-tcp-client = "netlab.tcpchat:client_main"
netlab-udp-server = "netlab.udpchat:server_main"
netlab-udp-client = "netlab.udpchat:client_main"

[tool.hatch.build.targets.wheel]
packages = ["netlab"]

[tool.pytest.ini_options]
addopts = "-ra"
