from hausaufgaben.errors import NotFoundError, ValidationError

DEFAULT_HOMEWORK = {
    "EnglischHausaufgabe": "SA Mediation Text Verbesserung fertig machen",
    "EnglischHausaufgabeDatum": "30.5.25",
    "DeutschHausaufgabe": "S.118/8 Mündlich, 9",
    "DeutschHausaufgabeDatum": "30.5.25",
    "MatheHausaufgabe": "S.176/8",
    "MatheHausaufgabeDatum": "30.5.25",
    "AlteMatheHausaufgabe": "NICHTS!",
    "AlteMatheHausaufgabeDatum": "28.5.25",
    "WartungsarbeitenZeit": "08:50",
    "Wartungsarbeiten": False,
    "Version": "6.3.2",
    "latein": 16,
}

# Felder, die ein Zurücksetzen überstehen
KEPT_ON_RESET = ("WartungsarbeitenZeit", "Version")


def validate_field(field, value):
    if field == "Wartungsarbeiten" and not isinstance(value, bool):
        raise ValidationError("Wartungsarbeiten muss true oder false sein")
    if field == "latein":
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
            raise ValidationError("Latein muss eine positive Zahl sein")


class HomeworkStore:

    def __init__(self, initial=None):
        self._data = dict(DEFAULT_HOMEWORK if initial is None else initial)

    def all(self):
        return dict(self._data)

    def __len__(self):
        return len(self._data)

    def get(self, field):
        if field not in self._data:
            raise NotFoundError(f"Feld '{field}' nicht gefunden")
        return self._data[field]

    def set(self, field, value):
        validate_field(field, value)
        self._data[field] = value
        return value

    def update(self, updates):
        updated, errors = [], []
        for field, value in updates.items():
            try:
                self.set(field, value)
            except ValidationError as e:
                errors.append(f"{field}: {e.message}")
                continue
            updated.append(field)
        return updated, errors

    def reset(self):
        data = {field: "" for field in DEFAULT_HOMEWORK}
        for field in KEPT_ON_RESET:
            data[field] = DEFAULT_HOMEWORK[field]
        data["Wartungsarbeiten"] = False
        data["latein"] = 0
        self._data = data
        return self.all()

    def toggle_maintenance(self):
        self._data["Wartungsarbeiten"] = not self._data.get("Wartungsarbeiten", False)
        return self._data["Wartungsarbeiten"]
