# Auto-generated __init__.py

from . import conftest
from .conftest import FlakyFileSystem
from .conftest import ReversedFileSystem
from .conftest import in_tmp
from .conftest import make_tree
from .conftest import sha1_b64
from .conftest import write_tree
from . import test_cli
from .test_cli import reset_logger
from .test_cli import test_algorithm_and_encoding_flags
from .test_cli import test_bad_algorithm_fails
from .test_cli import test_config_file
from .test_cli import test_flags_win_over_config
from .test_cli import test_json_output
from .test_cli import test_list_algorithms
from .test_cli import test_log_file
from .test_cli import test_missing_path_fails
from .test_cli import test_prints_the_tree
from . import test_composer
from .test_composer import composer
from .test_composer import test_algorithm_applies_everywhere
from .test_composer import test_blake2_options_are_passed_through
from .test_composer import test_encode_base64
from .test_composer import test_encode_base64url_has_no_padding
from .test_composer import test_encode_binary_keeps_every_byte
from .test_composer import test_encode_hex
from .test_composer import test_encode_unknown
from .test_composer import test_file_digest_starts_with_the_name
from .test_composer import test_fold_target_path
from .test_composer import test_folder_digest_skips_children_without_hash
from .test_composer import test_folder_digest_without_name
from .test_composer import test_link_digest
from .test_composer import test_root_file_name_can_be_omitted
from .test_composer import test_shake_uses_the_configured_length
from .test_composer import test_suppressed_name_is_omitted_once
from . import test_files
from .test_files import test_algorithm_option
from .test_files import test_different_content_same_name
from .test_files import test_different_name_same_content
from .test_files import test_encoding_option
from .test_files import test_extendable_output_length
from .test_files import test_file_hash_covers_name_and_content
from .test_files import test_file_hash_known_value
from .test_files import test_ignore_basename_for_files
from .test_files import test_ignore_root_name_for_files
from .test_files import test_large_file_is_streamed_completely
from .test_files import test_root_file_is_never_excluded_by_its_own_rule
from .test_files import test_same_hash_if_file_unchanged
from .test_files import test_same_name_and_content_in_other_folder
from . import test_folders
from .test_folders import StuckFileSystem
from .test_folders import assert_all_hashed
from .test_folders import test_current_directory_as_root
from .test_folders import test_empty_folder
from .test_folders import test_exclude_function
from .test_folders import test_exclude_wins_over_include
from .test_folders import test_failure_leaves_no_pending_siblings
from .test_folders import test_files_with_ignored_basename_share_a_hash
from .test_folders import test_folder_hash_over_name_and_children
from .test_folders import test_hashing_twice_is_identical
from .test_folders import test_ignore_basename_for_folders
from .test_folders import test_ignore_root_name_for_folders
from .test_folders import test_listing_order_does_not_matter
from .test_folders import test_missing_root_raises
from .test_folders import test_only_included_files
from .test_folders import test_only_included_folders
from .test_folders import test_path_patterns_are_anchored_at_the_root
from .test_folders import test_relocated_subtree_keeps_its_hash
from .test_folders import test_same_content_different_names
from .test_folders import test_same_hash_if_all_differences_are_excluded
from .test_folders import test_same_hash_if_only_difference_is_excluded
from .test_folders import test_same_name_different_content
from .test_folders import test_single_file_folder
from .test_folders import test_star_does_not_cross_folders_in_paths
from .test_folders import test_star_does_not_match_dotfiles
from . import test_matcher
from .test_matcher import rule
from .test_matcher import test_basename_or_path_may_match
from .test_matcher import test_braces_expand
from .test_matcher import test_callable_rule_is_used_verbatim
from .test_matcher import test_dotfiles_match_a_leading_dot_pattern
from .test_matcher import test_double_star_matches_at_any_depth
from .test_matcher import test_empty_rules_compile_to_none
from .test_matcher import test_exclude_by_basename
from .test_matcher import test_exclude_by_path
from .test_matcher import test_exclude_wins_over_include
from .test_matcher import test_gitignore_rule
from .test_matcher import test_include_rejects_unmatched
from .test_matcher import test_no_rules_keep_everything
from .test_matcher import test_pattern_must_match_the_whole_path
from .test_matcher import test_patterns_are_ored
from .test_matcher import test_patterns_must_be_strings
from .test_matcher import test_predicate_sees_what_it_is_matched_against
from .test_matcher import test_relative_match_path_uses_forward_slashes
from .test_matcher import test_star_does_not_cross_folders
from .test_matcher import test_star_skips_dotfiles
from .test_matcher import test_string_rule_is_one_pattern
from .test_matcher import test_unsupported_rules_are_rejected
from . import test_models
from .test_models import test_empty_folder_to_string
from .test_models import test_file_to_string
from .test_models import test_kind_from_mode
from .test_models import test_nested_folder_to_string
from .test_models import test_results_are_immutable
from .test_models import test_special_files_become_unknown_elements
from .test_models import test_to_dict
from .test_models import test_unknown_element_has_no_hash
from . import test_options
from .test_options import test_link_include_flag_must_be_a_bool
from .test_options import test_load_merges_over_defaults
from .test_options import test_load_missing_file_gives_defaults
from .test_options import test_merge_accepts_empty_sections
from .test_options import test_merge_keeps_defaults_untouched
from .test_options import test_merge_none_gives_defaults
from .test_options import test_merge_rejects_non_dicts
from .test_options import test_merge_rejects_unknown_keys
from .test_options import test_parse_compiles_rules
from .test_options import test_parse_defaults
from .test_options import test_parse_needs_length_for_shake
from .test_options import test_parse_rejects_bad_algorithm_options
from .test_options import test_parse_rejects_bad_encoding
from .test_options import test_parse_rejects_bad_globs
from .test_options import test_parse_rejects_non_bool_flags
from .test_options import test_parse_rejects_unknown_algorithm
from . import test_parameters
from .test_parameters import test_bad_options_fail_before_any_io
from .test_parameters import test_callback_inside_a_loop
from .test_parameters import test_callback_must_be_callable
from .test_parameters import test_callback_receives_the_error
from .test_parameters import test_callback_receives_the_result
from .test_parameters import test_callback_with_directory_and_options
from .test_parameters import test_name_and_directory_equals_full_path
from .test_parameters import test_name_must_be_a_string
from .test_parameters import test_options_dict_is_not_modified
from .test_parameters import test_parsed_options_are_accepted
from .test_parameters import test_split_name
from .test_parameters import test_split_name_accepts_paths
from .test_parameters import test_sync_wrapper
from .test_parameters import test_sync_wrapper_inside_a_loop_returns_a_task
from . import test_retry
from .test_retry import test_descriptor_slots_are_limited
from .test_retry import test_exhausted_descriptors_are_retried
from .test_retry import test_is_descriptor_exhaustion
from .test_retry import test_other_errors_are_not_retried
from .test_retry import test_parked_operations_share_one_drain
from .test_retry import test_queue_needs_a_positive_limit
from .test_retry import test_queue_propagates_other_errors
from .test_retry import test_queue_replays_until_success
from .test_retry import test_retried_result_matches_plain_result
from .test_retry import test_single_open_file_limit
from . import test_symlinks
from .test_symlinks import broken_link
from .test_symlinks import links
from .test_symlinks import test_can_skip_symbolic_links
from .test_symlinks import test_ignore_target_content_hashes_only_the_name
from .test_symlinks import test_ignore_target_content_target_path_only
from .test_symlinks import test_ignore_target_content_with_target_path
from .test_symlinks import test_ignored_link_basename_only_drops_the_link_name
from .test_symlinks import test_link_and_target_have_different_hashes
from .test_symlinks import test_link_inside_folder_follows_file_rule
from .test_symlinks import test_link_to_folder_hashes_like_the_folder
from .test_symlinks import test_link_to_folder_with_ignored_basenames
from .test_symlinks import test_missing_target_as_root_after_error
from .test_symlinks import test_missing_target_hashes_name_after_error
from .test_symlinks import test_missing_target_hashes_name_and_path_after_error
from .test_symlinks import test_missing_target_raises_by_default
from .test_symlinks import test_resolve_with_target_path
from .test_symlinks import test_resolve_with_target_path_without_names
from .test_symlinks import test_root_link_respects_ignore_root_name

__all__ = [
    "conftest",
    "test_cli",
    "test_composer",
    "test_files",
    "test_folders",
    "test_matcher",
    "test_models",
    "test_options",
    "test_parameters",
    "test_retry",
    "test_symlinks",
    "FlakyFileSystem",
    "ReversedFileSystem",
    "StuckFileSystem",
    "assert_all_hashed",
    "broken_link",
    "composer",
    "in_tmp",
    "links",
    "make_tree",
    "reset_logger",
    "rule",
    "sha1_b64",
    "test_algorithm_and_encoding_flags",
    "test_algorithm_applies_everywhere",
    "test_algorithm_option",
    "test_bad_algorithm_fails",
    "test_bad_options_fail_before_any_io",
    "test_basename_or_path_may_match",
    "test_blake2_options_are_passed_through",
    "test_braces_expand",
    "test_callable_rule_is_used_verbatim",
    "test_callback_inside_a_loop",
    "test_callback_must_be_callable",
    "test_callback_receives_the_error",
    "test_callback_receives_the_result",
    "test_callback_with_directory_and_options",
    "test_can_skip_symbolic_links",
    "test_config_file",
    "test_current_directory_as_root",
    "test_descriptor_slots_are_limited",
    "test_different_content_same_name",
    "test_different_name_same_content",
    "test_dotfiles_match_a_leading_dot_pattern",
    "test_double_star_matches_at_any_depth",
    "test_empty_folder",
    "test_empty_folder_to_string",
    "test_empty_rules_compile_to_none",
    "test_encode_base64",
    "test_encode_base64url_has_no_padding",
    "test_encode_binary_keeps_every_byte",
    "test_encode_hex",
    "test_encode_unknown",
    "test_encoding_option",
    "test_exclude_by_basename",
    "test_exclude_by_path",
    "test_exclude_function",
    "test_exclude_wins_over_include",
    "test_exhausted_descriptors_are_retried",
    "test_extendable_output_length",
    "test_failure_leaves_no_pending_siblings",
    "test_file_digest_starts_with_the_name",
    "test_file_hash_covers_name_and_content",
    "test_file_hash_known_value",
    "test_file_to_string",
    "test_files_with_ignored_basename_share_a_hash",
    "test_flags_win_over_config",
    "test_fold_target_path",
    "test_folder_digest_skips_children_without_hash",
    "test_folder_digest_without_name",
    "test_folder_hash_over_name_and_children",
    "test_gitignore_rule",
    "test_hashing_twice_is_identical",
    "test_ignore_basename_for_files",
    "test_ignore_basename_for_folders",
    "test_ignore_root_name_for_files",
    "test_ignore_root_name_for_folders",
    "test_ignore_target_content_hashes_only_the_name",
    "test_ignore_target_content_target_path_only",
    "test_ignore_target_content_with_target_path",
    "test_ignored_link_basename_only_drops_the_link_name",
    "test_include_rejects_unmatched",
    "test_is_descriptor_exhaustion",
    "test_json_output",
    "test_kind_from_mode",
    "test_large_file_is_streamed_completely",
    "test_link_and_target_have_different_hashes",
    "test_link_digest",
    "test_link_include_flag_must_be_a_bool",
    "test_link_inside_folder_follows_file_rule",
    "test_link_to_folder_hashes_like_the_folder",
    "test_link_to_folder_with_ignored_basenames",
    "test_list_algorithms",
    "test_listing_order_does_not_matter",
    "test_load_merges_over_defaults",
    "test_load_missing_file_gives_defaults",
    "test_log_file",
    "test_merge_accepts_empty_sections",
    "test_merge_keeps_defaults_untouched",
    "test_merge_none_gives_defaults",
    "test_merge_rejects_non_dicts",
    "test_merge_rejects_unknown_keys",
    "test_missing_path_fails",
    "test_missing_root_raises",
    "test_missing_target_as_root_after_error",
    "test_missing_target_hashes_name_after_error",
    "test_missing_target_hashes_name_and_path_after_error",
    "test_missing_target_raises_by_default",
    "test_name_and_directory_equals_full_path",
    "test_name_must_be_a_string",
    "test_nested_folder_to_string",
    "test_no_rules_keep_everything",
    "test_only_included_files",
    "test_only_included_folders",
    "test_options_dict_is_not_modified",
    "test_other_errors_are_not_retried",
    "test_parked_operations_share_one_drain",
    "test_parse_compiles_rules",
    "test_parse_defaults",
    "test_parse_needs_length_for_shake",
    "test_parse_rejects_bad_algorithm_options",
    "test_parse_rejects_bad_encoding",
    "test_parse_rejects_bad_globs",
    "test_parse_rejects_non_bool_flags",
    "test_parse_rejects_unknown_algorithm",
    "test_parsed_options_are_accepted",
    "test_path_patterns_are_anchored_at_the_root",
    "test_pattern_must_match_the_whole_path",
    "test_patterns_are_ored",
    "test_patterns_must_be_strings",
    "test_predicate_sees_what_it_is_matched_against",
    "test_prints_the_tree",
    "test_queue_needs_a_positive_limit",
    "test_queue_propagates_other_errors",
    "test_queue_replays_until_success",
    "test_relative_match_path_uses_forward_slashes",
    "test_relocated_subtree_keeps_its_hash",
    "test_resolve_with_target_path",
    "test_resolve_with_target_path_without_names",
    "test_results_are_immutable",
    "test_retried_result_matches_plain_result",
    "test_root_file_is_never_excluded_by_its_own_rule",
    "test_root_file_name_can_be_omitted",
    "test_root_link_respects_ignore_root_name",
    "test_same_content_different_names",
    "test_same_hash_if_all_differences_are_excluded",
    "test_same_hash_if_file_unchanged",
    "test_same_hash_if_only_difference_is_excluded",
    "test_same_name_and_content_in_other_folder",
    "test_same_name_different_content",
    "test_shake_uses_the_configured_length",
    "test_single_file_folder",
    "test_single_open_file_limit",
    "test_special_files_become_unknown_elements",
    "test_split_name",
    "test_split_name_accepts_paths",
    "test_star_does_not_cross_folders",
    "test_star_does_not_cross_folders_in_paths",
    "test_star_does_not_match_dotfiles",
    "test_star_skips_dotfiles",
    "test_string_rule_is_one_pattern",
    "test_suppressed_name_is_omitted_once",
    "test_sync_wrapper",
    "test_sync_wrapper_inside_a_loop_returns_a_task",
    "test_to_dict",
    "test_unknown_element_has_no_hash",
    "test_unsupported_rules_are_rejected",
    "write_tree",
]
