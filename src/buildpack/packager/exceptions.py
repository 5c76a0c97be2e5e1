class PackagingError(Exception):
    pass


class MissingArgumentError(PackagingError):
    pass


class BuildpackError(PackagingError):
    pass


class DependencyError(PackagingError):
    pass


class ChecksumError(DependencyError):
    pass


class PrePackageError(PackagingError):
    pass


class UnsafePathError(PackagingError):
    pass
