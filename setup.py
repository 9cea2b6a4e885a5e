# Vocabs Registry - a temporal metadata registry for controlled vocabularies
# Copyright (C) 2026 Vocabs Registry contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
# =============================================================================
"""Packaging for the vocabs_registry temporal snapshot and difference engine.

The REQUIRED_PACKAGES are the external packages imported by the code in
./vocabs_registry, and must be manually updated any time a dependency is added
to the project. Packages only needed to run the tests are listed in
TEST_PACKAGES and installed with the "tests" extra.
"""
import setuptools

REQUIRED_PACKAGES = [
    "attrs",
    "cattrs",
    "PyYAML",
    "SQLAlchemy>=1.4",
]

TEST_PACKAGES = [
    "mock",
    "more-itertools",
    "pytest",
]

setuptools.setup(
    name="vocabs-registry",
    version="1.0.0",
    python_requires=">=3.9",
    install_requires=REQUIRED_PACKAGES,
    extras_require={"tests": TEST_PACKAGES},
    packages=setuptools.find_packages(include=["vocabs_registry", "vocabs_registry.*"]),
    package_data={"vocabs_registry.notification": ["notification_config.yaml"]},
)
