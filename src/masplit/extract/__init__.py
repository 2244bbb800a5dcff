"""
Functions for creating matrices of delimited strings from variant calls.

The same functionality can be accessed from command line using command:
```
masplit extract --vcf "dna.vcf" --field AD --output "ad.tsv"
```
"""
# This package imports all public members from all submodules.
# Flake complains since they are not used directly.
# flake8: noqa

from .vcf import extract_field
