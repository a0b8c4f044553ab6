"""Tests for TraversalOptions and EntryType."""

import os
import stat
from pathlib import Path

import pytest

from readdirtree import ConfigurationError, EntryType, InvalidFilterError, TraversalOptions
from readdirtree.core.filters import accept_all


def stat_with_mode(mode):
    return os.stat_result((mode, 0, 0, 1, 0, 0, 0, 0, 0, 0))


REGULAR = stat_with_mode(stat.S_IFREG | 0o644)
DIRECTORY = stat_with_mode(stat.S_IFDIR | 0o755)
SYMLINK = stat_with_mode(stat.S_IFLNK | 0o777)
SOCKET = stat_with_mode(stat.S_IFSOCK | 0o755)
FIFO = stat_with_mode(stat.S_IFIFO | 0o644)


class TestEntryType:

    @pytest.mark.parametrize("value, expected", [
        ("files", EntryType.FILES),
        ("directories", EntryType.DIRECTORIES),
        ("both", EntryType.BOTH),
        ("all", EntryType.ALL),
        (" ALL ", EntryType.ALL),
        (EntryType.BOTH, EntryType.BOTH),
    ])
    def test_parse(self, value, expected):
        assert EntryType.parse(value) is expected

    @pytest.mark.parametrize("value", ["everything", "", None, 3])
    def test_parse_rejects_unknown(self, value):
        with pytest.raises(ConfigurationError, match="Unknown entry type"):
            EntryType.parse(value)

    @pytest.mark.parametrize("entry_type", [EntryType.FILES, EntryType.BOTH])
    def test_file_like_policies(self, entry_type):
        assert entry_type.accepts_file(REGULAR)
        assert entry_type.accepts_file(SYMLINK)
        assert not entry_type.accepts_file(SOCKET)
        assert not entry_type.accepts_file(FIFO)
        assert not entry_type.accepts_file(DIRECTORY)

    def test_all_policy(self):
        assert EntryType.ALL.accepts_file(REGULAR)
        assert EntryType.ALL.accepts_file(SYMLINK)
        assert EntryType.ALL.accepts_file(SOCKET)
        assert EntryType.ALL.accepts_file(FIFO)
        assert not EntryType.ALL.accepts_file(DIRECTORY)

    def test_directories_policy(self):
        for st in (REGULAR, SYMLINK, SOCKET, FIFO, DIRECTORY):
            assert not EntryType.DIRECTORIES.accepts_file(st)


class TestTraversalOptions:

    def test_defaults(self):
        options = TraversalOptions()
        assert options.root == '.'
        assert options.file_filter is None
        assert options.directory_filter is None
        assert options.depth is None
        assert options.entry_type is EntryType.FILES
        assert options.lstat is False
        assert options.validate() == []

    def test_from_mapping(self):
        options = TraversalOptions.from_mapping({'root': 'src', 'depth': 2, 'lstat': True})
        assert options.root == 'src'
        assert options.depth == 2
        assert options.lstat is True

    def test_from_mapping_none_means_default(self):
        options = TraversalOptions.from_mapping({'root': None, 'entry_type': None})
        assert options.root == '.'
        assert options.entry_type is EntryType.FILES

    def test_from_mapping_rejects_unknown_keys(self):
        with pytest.raises(ConfigurationError, match="Unknown option"):
            TraversalOptions.from_mapping({'fileFilter': '*.py'})

    def test_options_are_immutable(self):
        options = TraversalOptions()
        with pytest.raises(AttributeError):
            options.depth = 3

    @pytest.mark.parametrize("kwargs, message", [
        ({'depth': -1}, "depth cannot be negative"),
        ({'depth': 1.5}, "depth must be an integer"),
        ({'depth': True}, "depth must be an integer"),
        ({'root': ''}, "root cannot be empty"),
        ({'root': 42}, "root must be a path"),
        ({'entry_type': 'nope'}, "Unknown entry type"),
        ({'lstat': 'yes'}, "lstat must be a boolean"),
    ])
    def test_validate(self, kwargs, message):
        errors = TraversalOptions(**kwargs).validate()
        assert len(errors) == 1
        assert message in errors[0]

    def test_validate_collects_all_problems(self):
        errors = TraversalOptions(depth=-1, lstat=None).validate()
        assert len(errors) == 2

    def test_path_root_is_valid(self):
        assert TraversalOptions(root=Path('src')).validate() == []

    def test_resolved_substitutes_accept_all(self):
        resolved = TraversalOptions().resolved()
        assert resolved.file_filter is accept_all
        assert resolved.directory_filter is accept_all

    def test_resolved_normalizes_filters(self):
        resolved = TraversalOptions(file_filter='*.py', entry_type='all').resolved()
        assert callable(resolved.file_filter)
        assert resolved.entry_type is EntryType.ALL

    def test_resolved_raises_on_invalid_options(self):
        with pytest.raises(ConfigurationError, match="Invalid traversal options"):
            TraversalOptions(depth=-3).resolved()

    def test_resolved_raises_on_mixed_filters(self):
        with pytest.raises(InvalidFilterError):
            TraversalOptions(directory_filter=['a', '!b']).resolved()

    def test_resolved_leaves_original_untouched(self):
        options = TraversalOptions(file_filter='*.py')
        options.resolved()
        assert options.file_filter == '*.py'
