import re
import subprocess
from setuptools import setup

try:
    cmd = "git describe --tags --dirty --match='v*'"
    full_version = subprocess.run(
        cmd, shell=True, check=True, stdout=subprocess.PIPE, text=True
    ).stdout.splitlines()[0]

    # v1.2-3-gabcdef-dirty -> 1.2+git.3.gabcdef.dirty
    version = re.sub(r"^v", "", full_version)
    if "-" in version:
        release, local = version.split("-", 1)
        version = release + "+git." + local.replace("-", ".")

except (subprocess.CalledProcessError, IndexError):
    version = "0.0.0+nogit"


setup(
    name="stitchdag",
    version=version,
    description="BlockDAG coloring, tip tracking and fragmentation control",
    long_description=open("README.md", "r", encoding="utf8").read(),
    long_description_content_type="text/markdown",
    keywords="blockdag ghostdag k-cluster consensus simulation gymnasium",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Programming Language :: Python :: 3",
        "Topic :: Security",
    ],
    packages=["stitchdag"],
    package_dir={"stitchdag": "./python/stitchdag"},
    python_requires=">=3.9",
    install_requires=["gymnasium", "numpy", "pydantic", "pydantic-settings"],
    extras_require=dict(test=["pytest"]),
)
