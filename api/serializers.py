from rest_framework import serializers


class TranslationJobSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    trigger = serializers.CharField(read_only=True)
    status = serializers.CharField(read_only=True)
    display_status = serializers.SerializerMethodField()
    files = serializers.ListField(child=serializers.CharField(), read_only=True)
    current_file = serializers.CharField(read_only=True, allow_null=True)
    processed_files = serializers.ListField(child=serializers.CharField(), read_only=True)
    failed_files = serializers.ListField(child=serializers.CharField(), read_only=True)
    lines_done = serializers.IntegerField(read_only=True)
    lines_total = serializers.IntegerField(read_only=True)
    error_message = serializers.CharField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    started_at = serializers.DateTimeField(read_only=True, allow_null=True)
    finished_at = serializers.DateTimeField(read_only=True, allow_null=True)

    def get_display_status(self, obj):
        status_map = {
            "pending": "Queued",
            "running": "In Progress",
            "succeeded": "Completed",
            "failed": "Failed",
        }
        return status_map.get(obj.status, obj.status)
