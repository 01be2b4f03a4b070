from importlib import import_module

modules = [
    'users',
    'dna_processes',
    'workflows',
    'workflow_groups',
    'worksheets',
    'measurements',
]

for m in modules:
    import_module(f'.{m}', __name__)

__all__ = modules
