"""Static routing table: public operation name -> domain group.

The router only knows where an operation lives.  Argument checks, the
boundary call, default substitution and normalization all happen inside
the routed function, so resolving a name never changes its behaviour.
"""

from __future__ import annotations

import importlib
from typing import Any, Callable

from xlbridge.contracts.responses import GroupMeta

OPS_PACKAGE = "xlbridge.ops"

GROUPS: dict[str, tuple[str, ...]] = {
    "workbook": (
        "new",
        "new_empty",
        "read",
        "lazy_read",
        "write",
        "write_light",
        "write_with_password",
        "set_password",
    ),
    "file_format": (
        "write_with_compression",
        "write_with_encryption_options",
        "to_binary_xlsx",
    ),
    "csv_export": (
        "write_csv",
        "write_csv_with_options",
    ),
    "cells": (
        "get_cell_value",
        "get_formatted_value",
        "set_cell_value",
        "remove_cell",
        "set_number_format",
        "set_wrap_text",
        "set_cell_alignment",
        "set_cell_rotation",
        "set_cell_indent",
        "get_cell_horizontal_alignment",
        "get_cell_vertical_alignment",
        "get_cell_wrap_text",
        "get_cell_text_rotation",
        "get_cell_indent",
        "get_cell_number_format_id",
        "get_cell_format_code",
    ),
    "fonts": (
        "set_font_color",
        "set_font_size",
        "set_font_bold",
        "set_font_name",
        "set_font_italic",
        "set_font_underline",
        "set_font_strikethrough",
        "set_font_family",
        "set_font_scheme",
        "get_font_color",
        "get_font_size",
        "get_font_bold",
        "get_font_name",
        "get_font_italic",
        "get_font_underline",
        "get_font_strikethrough",
        "get_font_family",
        "get_font_scheme",
    ),
    "borders": (
        "set_border_style",
        "set_border_color",
        "get_border_style",
        "get_border_color",
    ),
    "fills": (
        "set_background_color",
        "get_cell_background_color",
        "get_cell_foreground_color",
        "get_cell_pattern_type",
        "set_pattern_fill",
        "get_pattern_fill",
        "set_gradient_fill",
        "set_linear_gradient_fill",
        "set_radial_gradient_fill",
        "set_three_color_gradient_fill",
        "get_gradient_fill",
        "clear_fill",
    ),
    "sheets": (
        "get_sheet_names",
        "get_sheet_count",
        "add_sheet",
        "clone_sheet",
        "remove_sheet",
        "rename_sheet",
        "set_sheet_state",
        "get_sheet_state",
        "move_range",
        "add_merge_cells",
        "remove_merge_cells",
        "get_merge_cells",
        "insert_new_row",
        "insert_new_column",
        "insert_new_column_by_index",
        "remove_row",
        "remove_column",
        "remove_column_by_index",
        "get_sheet_dimensions",
    ),
    "rows_columns": (
        "set_row_height",
        "get_row_height",
        "set_row_hidden",
        "get_row_hidden",
        "set_row_style",
        "set_column_width",
        "get_column_width",
        "set_column_auto_width",
        "get_column_auto_width",
        "set_column_hidden",
        "get_column_hidden",
        "copy_row_styling",
        "copy_column_styling",
    ),
    "charts": (
        "add_chart",
        "set_chart_style",
        "set_chart_data_labels",
        "set_chart_legend_position",
        "set_chart_3d_view",
        "add_chart_with_options",
        "set_chart_axis_titles",
        "get_chart_count",
        "get_charts",
    ),
    "drawings": (
        "add_image",
        "download_image",
        "change_image",
        "remove_image",
        "get_image_dimensions",
        "list_images",
        "count_images",
        "add_shape",
        "add_text_box",
        "add_connector",
    ),
    "print_settings": (
        "set_page_orientation",
        "get_page_orientation",
        "set_paper_size",
        "get_paper_size",
        "set_page_scale",
        "get_page_scale",
        "set_fit_to_page",
        "get_fit_to_page",
        "set_page_margins",
        "get_page_margins",
        "set_header_footer_margins",
        "get_header_footer_margins",
        "set_header",
        "get_header",
        "set_footer",
        "get_footer",
        "set_print_centered",
        "get_print_centered",
        "set_print_area",
        "get_print_area",
        "set_print_titles",
        "get_print_titles",
    ),
    "sheet_views": (
        "set_show_grid_lines",
        "get_show_grid_lines",
        "set_tab_selected",
        "get_tab_selected",
        "set_top_left_cell",
        "get_top_left_cell",
        "set_zoom_scale",
        "get_zoom_scale",
        "set_zoom_scale_normal",
        "get_zoom_scale_normal",
        "set_zoom_scale_page_layout",
        "get_zoom_scale_page_layout",
        "set_zoom_scale_page_break",
        "get_zoom_scale_page_break",
        "freeze_panes",
        "get_freeze_panes",
        "split_panes",
        "set_tab_color",
        "get_tab_color",
        "set_sheet_view",
        "get_sheet_view",
        "set_selection",
        "get_selection",
    ),
    "workbook_views": (
        "set_active_tab",
        "get_active_tab",
        "set_workbook_window_position",
        "get_workbook_window_position",
    ),
    "comments": (
        "add_comment",
        "get_comment",
        "update_comment",
        "remove_comment",
        "has_comments",
        "get_comments_count",
        "get_all_comments",
    ),
    "hyperlinks": (
        "add_hyperlink",
        "get_hyperlink",
        "remove_hyperlink",
        "has_hyperlink",
        "has_hyperlinks",
        "get_all_hyperlinks",
        "update_hyperlink",
        "add_bulk_hyperlinks",
        "remove_all_hyperlinks",
        "count_hyperlinks",
    ),
    "formulas": (
        "set_formula",
        "get_cell_formula",
        "set_array_formula",
        "create_named_range",
        "create_defined_name",
        "get_defined_names",
        "remove_defined_name",
    ),
    "auto_filters": (
        "set_auto_filter",
        "remove_auto_filter",
        "has_auto_filter",
        "get_auto_filter_range",
    ),
    "rich_text": (
        "create_rich_text",
        "create_rich_text_from_html",
        "create_text_element",
        "add_text_element_to_rich_text",
        "add_formatted_text_to_rich_text",
        "set_cell_rich_text",
        "get_cell_rich_text",
        "get_rich_text_plain_text",
        "rich_text_to_html",
        "get_rich_text_elements",
        "get_text_element_text",
        "get_text_element_font_properties",
    ),
    "ole_objects": (
        "new_ole_objects",
        "new_ole_object",
        "new_ole_object_from_file",
        "new_ole_object_with_data",
        "new_embedded_object_properties",
        "get_ole_objects_from_worksheet",
        "set_ole_objects_to_worksheet",
        "add_ole_object",
        "list_ole_objects",
        "count_ole_objects",
        "has_ole_objects",
        "get_ole_object_properties",
        "set_ole_object_properties",
        "get_ole_object_requires",
        "set_ole_object_requires",
        "get_ole_object_prog_id",
        "set_ole_object_prog_id",
        "get_ole_object_extension",
        "set_ole_object_extension",
        "get_ole_object_data",
        "set_ole_object_data",
        "load_ole_object_from_file",
        "save_ole_object_to_file",
        "is_ole_object_binary_format",
        "is_ole_object_excel_format",
        "get_embedded_object_prog_id",
        "set_embedded_object_prog_id",
        "get_embedded_object_shape_id",
        "set_embedded_object_shape_id",
        "determine_prog_id",
    ),
    "page_breaks": (
        "add_row_page_break",
        "add_column_page_break",
        "remove_row_page_break",
        "remove_column_page_break",
        "get_row_page_breaks",
        "get_column_page_breaks",
        "clear_row_page_breaks",
        "clear_column_page_breaks",
        "has_row_page_break",
        "has_column_page_break",
        "count_row_page_breaks",
        "count_column_page_breaks",
        "add_row_page_breaks",
        "add_column_page_breaks",
        "remove_row_page_breaks",
        "remove_column_page_breaks",
        "clear_all_page_breaks",
        "get_all_page_breaks",
    ),
    "tables": (
        "add_table",
        "get_tables",
        "get_table",
        "remove_table",
        "has_tables",
        "count_tables",
        "set_table_style",
        "get_table_style",
        "remove_table_style",
        "add_table_column",
        "get_table_columns",
        "modify_table_column",
        "set_table_totals_row",
        "get_table_totals_row",
    ),
    "pivot_tables": (
        "add_pivot_table",
        "has_pivot_tables",
        "count_pivot_tables",
        "refresh_all_pivot_tables",
        "remove_pivot_table",
        "get_pivot_table_names",
        "get_pivot_table_info",
        "get_pivot_table_source_range",
        "get_pivot_table_target_cell",
        "get_pivot_table_fields",
    ),
    "document_properties": (
        "get_custom_property",
        "set_custom_property",
        "remove_custom_property",
        "get_custom_property_names",
        "has_custom_property",
        "get_custom_properties_count",
        "clear_custom_properties",
        "get_title",
        "set_title",
        "get_description",
        "set_description",
        "get_subject",
        "set_subject",
        "get_keywords",
        "set_keywords",
        "get_creator",
        "set_creator",
        "get_last_modified_by",
        "set_last_modified_by",
        "get_category",
        "set_category",
        "get_created",
        "set_created",
        "get_modified",
        "set_modified",
        "set_properties",
        "get_all_properties",
    ),
    "data_validation": (
        "add_list_validation",
        "add_number_validation",
        "add_date_validation",
        "add_text_length_validation",
        "add_custom_validation",
        "remove_data_validation",
        "get_data_validations",
        "has_data_validations",
        "count_data_validations",
    ),
    "conditional_formatting": (
        "add_cell_value_rule",
        "add_cell_is_rule",
        "add_text_rule",
        "add_data_bar",
        "add_color_scale",
        "add_icon_set",
        "add_top_bottom_rule",
        "add_above_below_average_rule",
        "get_conditional_formatting_rules",
        "get_cell_value_rules",
        "get_color_scales",
        "get_data_bars",
        "get_icon_sets",
        "get_top_bottom_rules",
        "get_above_below_average_rules",
        "get_text_rules",
    ),
    "protection": (
        "set_sheet_protection",
        "get_sheet_protection",
        "is_sheet_protected",
        "set_workbook_protection",
        "is_workbook_protected",
        "get_workbook_protection_details",
        "set_cell_locked",
        "get_cell_locked",
        "set_cell_hidden",
        "get_cell_hidden",
    ),
}

ROUTES: dict[str, str] = {op: group for group, ops in GROUPS.items() for op in ops}

# older names kept for callers written against the flat surface
ALIASES: dict[str, str] = {
    "get_hyperlinks": "get_all_hyperlinks",
    "add_named_range": "create_named_range",
    "get_formatted_cell_value": "get_formatted_value",
    "write_to_bytes": "to_binary_xlsx",
}

_resolved: dict[str, Callable[..., Any]] = {}


def canonical(name: str) -> str:
    """Follow an alias to the routed name."""
    return ALIASES.get(name, name)


def group_of(name: str) -> str:
    """Group an operation is routed to; ``KeyError`` for unknown names."""
    return ROUTES[canonical(name)]


def resolve(name: str) -> Callable[..., Any]:
    """The public callable for ``name`` (aliases included)."""
    target = canonical(name)
    fn = _resolved.get(target)
    if fn is None:
        group = ROUTES.get(target)
        if group is None:
            raise KeyError(f"Unknown operation: {name}")
        module = importlib.import_module(f"{OPS_PACKAGE}.{group}")
        fn = getattr(module, target)
        _resolved[target] = fn
    return fn


def operations(group: str | None = None) -> list[str]:
    """Routed operation names, in table order."""
    if group is None:
        return list(ROUTES)
    if group not in GROUPS:
        raise KeyError(f"Unknown group: {group}")
    return list(GROUPS[group])


def groups() -> list[GroupMeta]:
    return [
        GroupMeta(name=name, module=f"{OPS_PACKAGE}.{name}", operations=list(ops))
        for name, ops in GROUPS.items()
    ]


def load_all() -> None:
    """Import every group module so each operation is declared."""
    for group in GROUPS:
        importlib.import_module(f"{OPS_PACKAGE}.{group}")
