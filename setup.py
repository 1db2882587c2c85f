from setuptools import setup, find_packages

NAME = "neuron"
VERSION = "0.1.0"
DESCRIPTION = ("A trainable feed-forward neuron layer with forward and "
               "backward propagation.")
AUTHOR = "matee8"
AUTHOR_EMAIL = "graves-bluff-pesky@duck.com"
URL = "https://github.com/matee8/neuron"

REQUIRED = ["numpy>=2.2.5"]

EXTRAS = {"test": ["pytest>=8.0"]}

try:
    with open("README.md", "r", encoding="utf-8") as f:
        LONG_DESCRIPTION = f.read()
except FileNotFoundError:
    LONG_DESCRIPTION = DESCRIPTION

setup(name=NAME,
      version=VERSION,
      description=DESCRIPTION,
      long_description=LONG_DESCRIPTION,
      long_description_content_type="text/markdown",
      author=AUTHOR,
      author_email=AUTHOR_EMAIL,
      url=URL,
      package_dir={"": "src"},
      packages=find_packages(where="src"),
      python_requires=">=3.9",
      install_requires=REQUIRED,
      extras_require=EXTRAS,
      entry_points={"console_scripts": ["neuron=neuron.__main__:main"]})
