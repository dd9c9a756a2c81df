# sync_images.py
from hausaufgaben import create_app, get_image_service
from hausaufgaben.errors import ScanError

app = create_app()

with app.app_context():
    print("🔧 Gleiche Bildablage mit dem Datenträger ab...")

    service = get_image_service()
    for category in service.categories.names():
        try:
            records = service.metadata.refresh(category)
        except ScanError as e:
            print(f"❌ {category}: {e}")
            continue
        print(f"📁 {category}: {len(records)} Bild(er)")
        for record in records:
            print(f"   - {record.filename} ({record.original_name}, {record.size} Bytes)")

    print("🎯 Fertig!")
