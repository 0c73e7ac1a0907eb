from importlib.metadata import PackageNotFoundError, version

try:
    version = version("RLParse")
except PackageNotFoundError:
    version = "0.0.0"
