from rest_framework import serializers


class JoinSerializer(serializers.Serializer):
    title = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    name = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    region = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)

    def validate(self, attrs):
        if not all(attrs.get(field) for field in ("title", "name", "region")):
            raise serializers.ValidationError("Need parameters: title, name, region")
        return attrs


class EndSerializer(serializers.Serializer):
    title = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)

    def validate(self, attrs):
        if not attrs.get("title"):
            raise serializers.ValidationError("Need parameters: title")
        return attrs
