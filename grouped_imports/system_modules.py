"""Frameworks shipped in ``/System/Library/Frameworks``.

These names make up the default ``system modules`` group.
"""
from __future__ import annotations

SYSTEM_MODULES: frozenset[str] = frozenset(
    {
        "AGL",
        "AVFAudio",
        "AVFoundation",
        "AVKit",
        "Accelerate",
        "Accessibility",
        "Accounts",
        "AdServices",
        "AdSupport",
        "AddressBook",
        "AppKit",
        "AppTrackingTransparency",
        "AppleScriptKit",
        "AppleScriptObjC",
        "ApplicationServices",
        "AudioToolbox",
        "AudioUnit",
        "AudioVideoBridging",
        "AuthenticationServices",
        "AutomaticAssessmentConfiguration",
        "Automator",
        "BackgroundTasks",
        "BusinessChat",
        "CFNetwork",
        "CalendarStore",
        "CallKit",
        "Carbon",
        "ClassKit",
        "CloudKit",
        "Cocoa",
        "Collaboration",
        "ColorSync",
        "Combine",
        "Contacts",
        "ContactsUI",
        "CoreAudio",
        "CoreAudioKit",
        "CoreAudioTypes",
        "CoreBluetooth",
        "CoreData",
        "CoreDisplay",
        "CoreFoundation",
        "CoreGraphics",
        "CoreHaptics",
        "CoreImage",
        "CoreLocation",
        "CoreMIDI",
        "CoreMIDIServer",
        "CoreML",
        "CoreMedia",
        "CoreMediaIO",
        "CoreMotion",
        "CoreServices",
        "CoreSpotlight",
        "CoreTelephony",
        "CoreText",
        "CoreVideo",
        "CoreWLAN",
        "CryptoKit",
        "CryptoTokenKit",
        "DVDPlayback",
        "DeveloperToolsSupport",
        "DeviceCheck",
        "DirectoryService",
        "DiscRecording",
        "DiscRecordingUI",
        "DiskArbitration",
        "DriverKit",
        "EventKit",
        "ExceptionHandling",
        "ExecutionPolicy",
        "ExternalAccessory",
        "FWAUserLib",
        "FileProvider",
        "FileProviderUI",
        "FinderSync",
        "ForceFeedback",
        "Foundation",
        "GLKit",
        "GLUT",
        "GSS",
        "GameController",
        "GameKit",
        "GameplayKit",
        "HIDDriverKit",
        "Hypervisor",
        "ICADevices",
        "IMServicePlugIn",
        "IOBluetooth",
        "IOBluetoothUI",
        "IOKit",
        "IOSurface",
        "IOUSBHost",
        "IdentityLookup",
        "ImageCaptureCore",
        "ImageIO",
        "InputMethodKit",
        "InstallerPlugins",
        "InstantMessage",
        "Intents",
        "JavaNativeFoundation",
        "JavaRuntimeSupport",
        "JavaScriptCore",
        "JavaVM",
        "Kerberos",
        "Kernel",
        "KernelManagement",
        "LDAP",
        "LatentSemanticMapping",
        "LinkPresentation",
        "LocalAuthentication",
        "MLCompute",
        "MapKit",
        "MediaAccessibility",
        "MediaLibrary",
        "MediaPlayer",
        "MediaToolbox",
        "Message",
        "Metal",
        "MetalKit",
        "MetalPerformanceShaders",
        "MetalPerformanceShadersGraph",
        "MetricKit",
        "ModelIO",
        "MultipeerConnectivity",
        "NaturalLanguage",
        "NearbyInteraction",
        "NetFS",
        "Network",
        "NetworkExtension",
        "NetworkingDriverKit",
        "NotificationCenter",
        "OSAKit",
        "OSLog",
        "OpenAL",
        "OpenCL",
        "OpenDirectory",
        "OpenGL",
        "PCIDriverKit",
        "PCSC",
        "PDFKit",
        "ParavirtualizedGraphics",
        "PassKit",
        "PencilKit",
        "Photos",
        "PhotosUI",
        "PreferencePanes",
        "PushKit",
        "Python",
        "QTKit",
        "Quartz",
        "QuartzCore",
        "QuickLook",
        "QuickLookThumbnailing",
        "RealityKit",
        "ReplayKit",
        "Ruby",
        "SafariServices",
        "SceneKit",
        "ScreenSaver",
        "ScreenTime",
        "ScriptingBridge",
        "Security",
        "SecurityFoundation",
        "SecurityInterface",
        "SensorKit",
        "ServiceManagement",
        "Social",
        "SoundAnalysis",
        "Speech",
        "SpriteKit",
        "StoreKit",
        "SwiftUI",
        "SyncServices",
        "System",
        "SystemConfiguration",
        "SystemExtensions",
        "TWAIN",
        "Tcl",
        "Tk",
        "UIKit",
        "USBDriverKit",
        "UniformTypeIdentifiers",
        "UserNotifications",
        "UserNotificationsUI",
        "VideoDecodeAcceleration",
        "VideoSubscriberAccount",
        "VideoToolbox",
        "Virtualization",
        "Vision",
        "WebKit",
        "WidgetKit",
        "iTunesLibrary",
        "vecLib",
    }
)
