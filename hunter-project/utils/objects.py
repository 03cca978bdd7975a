# What it does: Manages the object database, the content-addressed storage of file snapshots (blobs)
# How it does: An object's name is the SHA-1 of its raw bytes. `put_object` writes the bytes once under `.hunter/objects/<hash>` using an exclusive create, so writing the same content again is a no-op. Objects are stored flat, without header or compression
# What data structure it uses: Hash Table / Dictionary (the object store is a content-addressed dictionary where the SHA-1 hash is the key)

import hashlib
import logging
import os

from .repository import hunter_path, OBJECTS_DIR

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 64 * 1024


def hash_content(content): # Returns the hex digest of `content` without storing anything
    return hashlib.sha1(content).hexdigest()


def hash_file(path): # Streams a working file through SHA-1, one read pass, nothing stored
    sha1 = hashlib.sha1()
    with open(path, 'rb') as f:
        for chunk in iter(lambda: f.read(READ_CHUNK_SIZE), b''):
            sha1.update(chunk)
    return sha1.hexdigest()


def object_path(repo_root, sha1):
    return hunter_path(repo_root, OBJECTS_DIR, sha1)


def has_object(repo_root, sha1):
    return os.path.isfile(object_path(repo_root, sha1))


def put_object(repo_root, content):
    """
    Stores `content` and returns its hash. If an object with that hash
    already exists nothing is written. Two concurrent writers of the same
    content race on O_EXCL: the loser sees FileExistsError and keeps the
    winner's (identical) bytes.
    """
    sha1 = hash_content(content)
    path = object_path(repo_root, sha1)

    if os.path.exists(path):
        logger.debug("object %s already stored", sha1)
        return sha1

    try:
        fd = os.open(path, os.O_CREAT | os.O_EXCL | os.O_WRONLY, 0o644)
    except FileExistsError:
        logger.debug("object %s created concurrently", sha1)
        return sha1

    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(content)
    except OSError:
        # Never leave a truncated object behind under a valid name
        os.unlink(path)
        raise
    return sha1


def store_file(repo_root, file_path): # Reads a working file and stores it as a blob, returns the blob hash
    with open(file_path, 'rb') as f:
        content = f.read()
    return put_object(repo_root, content)


def read_object(repo_root, sha1): # Returns the raw bytes of an object, FileNotFoundError if it was never stored
    path = object_path(repo_root, sha1)
    if not os.path.exists(path):
        raise FileNotFoundError(f"Object not found: {sha1}")
    with open(path, 'rb') as f:
        return f.read()
