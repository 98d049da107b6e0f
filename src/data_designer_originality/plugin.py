from data_designer.plugins.plugin import Plugin, PluginType

originality_plugin = Plugin(
    config_qualified_name="data_designer_originality.config.OriginalityColumnConfig",
    impl_qualified_name="data_designer_originality.generator.OriginalityColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)

text_similarity_plugin = Plugin(
    config_qualified_name="data_designer_originality.config.TextSimilarityColumnConfig",
    impl_qualified_name="data_designer_originality.generator.TextSimilarityColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
