"""Git gateway.

Import from submodules:
- abc: Git
- real: RealGit
- fake: FakeGit
- dry_run: DryRunGit
- types: TagRef, TagAuthor
"""
