"""Entity transformers, one subpackage per target platform."""
